# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Identity is caller-supplied; there is no auth.users linkage

"""
Expected Supabase table structure:

users:
- id: text (primary key) - generated as user_<ms>_<hex>
- name: text (not null)
- email: text (nullable)
- avatar: text (nullable) - first letter of the name
- status: text (default: 'offline')
- provider: text (default: 'email') - email, google, twitter, discord
- provider_id: text (nullable) - id on the OAuth provider side
- created_at: timestamptz (default: now())
- last_login_at: timestamptz (nullable)
- index on (provider, provider_id)
"""
