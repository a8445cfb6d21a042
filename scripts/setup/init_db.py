# scripts/setup/init_db.py
"""
Initialize database — creates all tables.
Only useful with a persistent DATABASE_URL (PostgreSQL or a SQLite file);
the default in-memory database is created on startup by the app itself.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from motorent.database import create_tables, engine, Base
from motorent.config import settings
from sqlalchemy import text


def main():
    print("🗄️  Motorent DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    if settings.is_in_memory:
        print("⚠️  DATABASE_URL is in-memory — tables vanish when this script exits.")
        print("   Set DATABASE_URL in .env to a persistent database first.")
        sys.exit(1)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(Base.metadata.tables)
    print(f"✅ Tables ready ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn motorent.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
