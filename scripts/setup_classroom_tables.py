"""
setup_classroom_tables.py
=========================
Print the Supabase schema Codetrio expects and check that the tables answer.

Usage:
    python scripts/setup_classroom_tables.py            # print SQL
    python scripts/setup_classroom_tables.py --check    # query each table
"""

import argparse
from pathlib import Path

import toml
from supabase import create_client

SECRETS_PATH = Path(__file__).parent.parent / ".streamlit" / "secrets.toml"

TABLES = ("classes", "students", "user_roles")

SCHEMA_SQL = """
-- ============================================================================
-- CODETRIO SCHEMA FOR SUPABASE
-- ============================================================================
-- Run this SQL in your Supabase SQL Editor

CREATE TYPE app_role AS ENUM ('admin', 'student');

CREATE TABLE IF NOT EXISTS user_roles (
    id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
    user_id UUID NOT NULL REFERENCES auth.users(id) ON DELETE CASCADE,
    role app_role NOT NULL DEFAULT 'student',
    CONSTRAINT unique_user_role UNIQUE (user_id, role)
);

CREATE TABLE IF NOT EXISTS classes (
    id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    language TEXT NOT NULL CHECK (language IN ('C++', 'Python')),
    created_at TIMESTAMP WITH TIME ZONE DEFAULT TIMEZONE('utc', NOW())
);

CREATE TABLE IF NOT EXISTS students (
    id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
    class_id UUID NOT NULL REFERENCES classes(id) ON DELETE CASCADE,
    user_id UUID REFERENCES auth.users(id) ON DELETE SET NULL,
    full_name TEXT NOT NULL,
    points INTEGER NOT NULL DEFAULT 0 CHECK (points >= 0),
    created_at TIMESTAMP WITH TIME ZONE DEFAULT TIMEZONE('utc', NOW())
);

CREATE INDEX IF NOT EXISTS idx_students_class ON students(class_id);

-- Role check usable inside policies without recursive RLS
CREATE OR REPLACE FUNCTION has_role(_user_id UUID, _role app_role)
RETURNS BOOLEAN LANGUAGE SQL STABLE SECURITY DEFINER SET search_path = public AS $$
    SELECT EXISTS (SELECT 1 FROM user_roles WHERE user_id = _user_id AND role = _role)
$$;

ALTER TABLE user_roles ENABLE ROW LEVEL SECURITY;
ALTER TABLE classes ENABLE ROW LEVEL SECURITY;
ALTER TABLE students ENABLE ROW LEVEL SECURITY;

CREATE POLICY "Users read own roles" ON user_roles
    FOR SELECT USING (auth.uid() = user_id);

CREATE POLICY "Signed-in users read classes" ON classes
    FOR SELECT USING (auth.role() = 'authenticated');
CREATE POLICY "Admins manage classes" ON classes
    FOR ALL USING (has_role(auth.uid(), 'admin'));

CREATE POLICY "Signed-in users read students" ON students
    FOR SELECT USING (auth.role() = 'authenticated');
CREATE POLICY "Admins manage students" ON students
    FOR ALL USING (has_role(auth.uid(), 'admin'));
"""


def get_supabase_client():
    """Get Supabase client from .streamlit/secrets.toml."""
    if not SECRETS_PATH.exists():
        print("ERROR: .streamlit/secrets.toml not found!")
        print("Copy .streamlit/secrets.toml.example and fill in your Supabase credentials.")
        return None

    secrets = toml.load(SECRETS_PATH)
    try:
        url = secrets["supabase"]["url"]
        key = secrets["supabase"]["key"]
    except KeyError as e:
        print(f"ERROR: Missing secret {e} in [supabase]")
        return None

    return create_client(url, key)


def check_tables(client) -> bool:
    """Select one row from each table; RLS may hide rows but not errors."""
    ok = True
    for table in TABLES:
        try:
            client.table(table).select("*").limit(1).execute()
            print(f"  OK   {table}")
        except Exception as e:
            ok = False
            print(f"  FAIL {table}: {e}")
    return ok


def main():
    parser = argparse.ArgumentParser(description="Codetrio Supabase schema helper")
    parser.add_argument("--check", action="store_true", help="Query each table instead of printing SQL")
    args = parser.parse_args()

    if not args.check:
        print(SCHEMA_SQL)
        return 0

    client = get_supabase_client()
    if client is None:
        return 1

    print("Checking Codetrio tables...")
    return 0 if check_tables(client) else 1


if __name__ == "__main__":
    raise SystemExit(main())
