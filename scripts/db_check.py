import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from config import settings
from infrastructure import Database, AccountStore, SnapshotStore


def main():
    db_path = settings.db_path
    print('DB:', db_path)
    if not db_path.exists():
        print('DB file not found')
        return 1
    with Database(db_path) as db:
        for table, count in db.table_counts().items():
            print(f'{table}:', count)
        snapshots = SnapshotStore(db)
        for account in AccountStore(db).list_all():
            latest = snapshots.latest_per_queue(account.slug)
            queues = ', '.join(f'{s.queue_type}={s.tier} {s.division} {s.league_points}LP' for s in latest)
            print(f'{account.slug} ({account.riot_id}):', queues or 'no snapshots')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
