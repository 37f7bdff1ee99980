# Supabase tables: friend_requests, friends
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

friend_requests:
- id: bigserial (primary key)
- from_user_id: text (foreign key to users.id, not null)
- to_user_id: text (foreign key to users.id, not null)
- status: text (default: 'pending') - values: pending, accepted, rejected
- created_at: timestamptz (default: now())
- unique constraint on (from_user_id, to_user_id)

friends:
- id: bigserial (primary key)
- user_id: text (foreign key to users.id, not null) - lexicographically smaller id
- friend_id: text (foreign key to users.id, not null)
- created_at: timestamptz (default: now())
- unique constraint on (user_id, friend_id)
"""
