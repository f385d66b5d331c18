"""
Create the case and time entry tables read by the progress service.

Usage:
    python -m db.setup              # uses DATABASE_URL from .env
    python -m db.setup <url>        # explicit connection string
"""

import os
import sys
from pathlib import Path

import psycopg2
from dotenv import load_dotenv

load_dotenv()

SCHEMA_FILE = Path(__file__).parent / "schema.sql"


def run_schema(database_url: str) -> list[str]:
    print("Connecting to database...")
    conn = psycopg2.connect(database_url)
    conn.autocommit = True
    try:
        with conn.cursor() as cur:
            print("Running schema...")
            cur.execute(SCHEMA_FILE.read_text())

            cur.execute("""
                SELECT table_name
                FROM information_schema.tables
                WHERE table_schema = 'public'
                AND table_name IN ('cases', 'time_entries')
                ORDER BY table_name;
            """)
            tables = [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

    print(f"Tables ready: {', '.join(tables)}")
    return tables


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else os.getenv("DATABASE_URL", "")
    if not url:
        print("ERROR: No DATABASE_URL provided.")
        print("Either set it in .env or pass as argument:")
        print("  python -m db.setup 'postgresql://...'")
        sys.exit(1)
    run_schema(url)
