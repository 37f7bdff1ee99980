# Supabase tables: dm_chats, group_chats
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

dm_chats:
- id: text (primary key) - dm_<lower user id>_<higher user id>
- user1_id: text (foreign key to users.id, not null) - lexicographically smaller id
- user2_id: text (foreign key to users.id, not null)
- created_at: timestamptz (default: now())

group_chats:
- id: text (primary key) - group_<ms>_<hex>
- name: text (not null)
- icon: text (nullable)
- description: text (nullable)
- creator_id: text (foreign key to users.id, nullable)
- members: jsonb (default: '[]') - [{"id": ..., "name": ..., ...}]
- created_at: timestamptz (default: now())
- gin index on members (jsonb_path_ops) for @> lookups
"""
