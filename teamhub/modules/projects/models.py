# Supabase table: projects
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

projects:
- id: text (primary key) - caller supplied or project_<ms>_<hex>
- name: text (not null)
- icon: text (nullable)
- description: text (nullable)
- creator_id: text (foreign key to users.id, nullable)
- linked_chats: jsonb (default: '[]') - [{"id", "name", "type", "icon"}]
- project_members: jsonb (default: '[]') - [{"id", "name", "permission", ...}]
- game_settings: jsonb (nullable) - {"title", "platforms", "genre", "tags", ...}
- created_at: timestamptz (default: now())
- gin index on project_members (jsonb_path_ops) for @> lookups
"""
