# Supabase table: attendance
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

attendance:
- id: bigserial (primary key)
- user_id: text (foreign key to users.id, not null)
- date: date (not null)
- clock_in: timestamptz (nullable)
- clock_out: timestamptz (nullable)
- break_minutes: integer (default: 0)
- status: text (nullable) - e.g. working, break, done
- unique constraint on (user_id, date)
"""
