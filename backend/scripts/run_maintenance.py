"""유지보수 작업 실행 (cron 등에서 사용)

python scripts/run_maintenance.py extend-weekly
python scripts/run_maintenance.py fix-sunday
python scripts/run_maintenance.py reset-capacity
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.database import SessionLocal, engine
from app.logging_config import configure_logging
from app.services.dates import today
from app.services.maintenance import extend_weekly_orders, fix_sunday_dates, reset_capacity


def main():
    parser = argparse.ArgumentParser(description="도시락 주문 유지보수 작업")
    parser.add_argument("job", choices=["extend-weekly", "fix-sunday", "reset-capacity"])
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    if engine is None:
        print("DATABASE_URL이 설정되지 않았습니다.")
        sys.exit(1)
    db = SessionLocal()
    try:
        if args.job == "extend-weekly":
            counts = extend_weekly_orders(db, today())
            print(f"정기 주문 {counts.orders_updated}건, 고객 사본 {counts.customer_orders_updated}건 갱신")
        elif args.job == "fix-sunday":
            counts = fix_sunday_dates(db)
            print(f"주문 {counts.orders_fixed}건, 고객 사본 {counts.customers_fixed}건 수정")
        else:
            print(f"daily_capacity {reset_capacity(db)}건 삭제")
    finally:
        db.close()


if __name__ == "__main__":
    main()
