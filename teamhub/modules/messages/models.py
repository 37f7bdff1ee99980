# Supabase table: messages
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

messages:
- id: bigserial (primary key) - strictly increasing, used as the polling cursor
- chat_id: text (not null) - dm_chats.id or group_chats.id (shared namespace)
- sender_id: text (not null)
- sender_name: text (not null)
- content: text (not null)
- timestamp: timestamptz (default: now())
- reactions: jsonb (default: '[]')
- reply_to: bigint (foreign key to messages.id, nullable, on delete set null)
- is_edited: boolean (default: false)
- index on (chat_id, id)
- index on (chat_id, timestamp)
"""
