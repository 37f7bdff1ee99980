# Supabase table: project_data
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

project_data:
- id: bigserial (primary key)
- project_id: text (unique, not null) - one aggregate per project
- gantt_tasks: jsonb (default: '[]')
- task_groups: jsonb (default: '[]')
- milestones: jsonb (default: '[]')
- todo_items: jsonb (default: '[]')
- spreadsheet_links: jsonb (default: '[]')
- memo_entries: jsonb (default: '[]')
- url_links: jsonb (default: '[]')
- custom_events: jsonb (default: '[]')
- widget_order: jsonb (default: '["taskSummary", "gantt", "calendar", "todo", "spreadsheet", "url", "memo"]')
- holiday_settings: jsonb (default: '{"excludeSaturday": true, "excludeSunday": true, "excludeHolidays": true}')
- updated_at: timestamptz (default: now())

The column defaults must match DEFAULT_WIDGET_ORDER / DEFAULT_HOLIDAY_SETTINGS
in schemas.py: reads of a missing row return those values without a write,
partial upserts of a new row rely on the column defaults.
"""
