"""Fill (or empty) the blog_posts table with fake posts.

Usage:
    python seed_posts.py [COUNT] [--reset] [--test]

--reset  delete every existing post first
--test   target TEST_DATABASE_URL instead of SUPABASE_URL

Connection settings come from the environment / .env via app.config.
"""
import asyncio
import logging
import sys

from app.adapters.supabase_adapter import SupabasePostAdapter
from app.config import get_settings
from app.seed import seed_posts

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s │ %(levelname)-8s │ %(message)s")
logger = logging.getLogger(__name__)


async def main(argv: list[str]) -> None:
    settings = get_settings()
    flags = {a for a in argv if a.startswith("--")}
    args = [a for a in argv if not a.startswith("--")]
    count = int(args[0]) if args else 10

    if "--test" in flags:
        if not settings.test_database_url:
            raise SystemExit("TEST_DATABASE_URL is not set")
        url = settings.test_database_url
    else:
        url = settings.supabase_url

    db = SupabasePostAdapter.connect(
        url, settings.supabase_service_role_key, table=settings.posts_table
    )

    try:
        if "--reset" in flags:
            removed = await db.delete_all_posts()
            print(f"[reset] Deleted {removed} posts")

        rows = await seed_posts(db, count=count)
        print(f"[seed] Inserted {len(rows)} posts")
        print(f"[done] Total posts: {await db.count_posts()}")
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
