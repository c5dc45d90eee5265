"""
Script to add the unique indexes behind the rating/favorite/block pair rules
Run this script against a database created before those constraints existed
"""

import sys
from sqlalchemy import text
from skip2love.database import engine

UNIQUE_INDEXES = [
    ("uq_ratings_rater_rated", "ratings", "rater_id, rated_user_id"),
    ("uq_favorites_user_post", "favorites", "user_id, post_id"),
    ("uq_blocks_blocker_blocked", "blocks", "blocker_id, blocked_user_id"),
]


def run_migration():
    """Create the pair unique indexes if they are missing"""

    print("Running migration: Adding unique indexes for ratings, favorites and blocks...")

    try:
        with engine.connect() as conn:
            for index_name, table, columns in UNIQUE_INDEXES:
                conn.execute(text(
                    f"CREATE UNIQUE INDEX IF NOT EXISTS {index_name} ON {table} ({columns})"
                ))
                print(f"✓ Ensured '{index_name}' on {table} ({columns})")

            # Commit the changes
            conn.commit()

            print("\nMigration completed successfully!")

    except Exception as e:
        print(f"✗ Error running migration: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run_migration()
