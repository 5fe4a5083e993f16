"""관리자 대시보드 주간 요약"""
from collections import Counter
from datetime import date, timedelta

from sqlalchemy.orm import Session

from app.config import get_settings
from app.schemas.admin import DayCount, TodayDelivery, WeeklySummary
from app.services.dates import WEEKDAY_LABELS, get_day_of_week, week_monday
from app.services.orders import get_orders


def get_weekly_summary(db: Session, base: date) -> WeeklySummary:
    """이번 주(월~일) 생성된 주문 기준: 총 주문, 예상 매출, 요일별 배송 수, 금일 배송"""
    start = week_monday(base)
    end = start + timedelta(days=6)
    orders = get_orders(db, start_date=start, end_date=end)

    by_day: Counter[str] = Counter()
    for order in orders:
        for s in order.settlements:
            by_day[get_day_of_week(s.date)] += 1

    todays = [o for o in orders if any(s.date == base for s in o.settlements)]
    return WeeklySummary(
        total_orders=len(orders),
        expected_revenue=len(orders) * get_settings().lunchbox_price,
        orders_by_day=[DayCount(day=d, count=by_day.get(d, 0)) for d in WEEKDAY_LABELS],
        today_delivery=TodayDelivery(
            total=len(todays),
            kings_park=sum(1 for o in todays if o.location == "Kings Park"),
            eastern_creek=sum(1 for o in todays if o.location == "Eastern Creek"),
        ),
    )
