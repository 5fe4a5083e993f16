"""날짜/요일 유틸 - 다음 주(월~금), 요일 라벨, 정기 주문 날짜 확장"""
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import structlog

from app.config import get_settings

log = structlog.get_logger(__name__)

DAY_LABELS = ("월", "화", "수", "목", "금", "토", "일")  # date.weekday() 순서
WEEKDAY_LABELS = DAY_LABELS[:5]


def today() -> date:
    """영업 시간대 기준 오늘 날짜"""
    tz = ZoneInfo(get_settings().business_timezone)
    return datetime.now(tz).date()


def day_start_utc(d: date) -> datetime:
    """영업 시간대 기준 d 0시를 UTC 시각으로 (created_at 범위 조회용)"""
    tz = ZoneInfo(get_settings().business_timezone)
    return datetime.combine(d, time.min, tzinfo=tz).astimezone(timezone.utc)


def format_date(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def parse_date(value: str | date | None) -> date | None:
    """YYYY-MM-DD 파싱. 잘못된 값은 None"""
    if isinstance(value, date):
        return value
    if not value or not str(value).strip():
        return None
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def get_day_of_week(d: date) -> str:
    """요일 라벨: 월 화 수 목 금 토 일"""
    return DAY_LABELS[d.weekday()]


def get_day_of_week_from_date(value: str | date | None) -> str | None:
    d = parse_date(value)
    return get_day_of_week(d) if d else None


def week_monday(d: date) -> date:
    """d가 속한 주의 월요일"""
    return d - timedelta(days=d.weekday())


def next_monday(d: date) -> date:
    """다음 주 월요일. 월요일 당일이면 7일 뒤"""
    return week_monday(d) + timedelta(days=7)


def get_next_week_dates(base: date | None = None) -> list[date]:
    """다음 주 월~금 5일"""
    monday = next_monday(base or today())
    return [monday + timedelta(days=i) for i in range(5)]


def get_weekly_recurring_dates(selected_dates: Iterable[str | date], weeks_ahead: int = 1) -> list[str]:
    """
    선택된 날짜마다 해당 날짜 + 이후 weeks_ahead주의 같은 요일을 생성.
    중복 제거 후 정렬. ["2024-06-03"], 1 -> ["2024-06-03", "2024-06-10"]
    """
    result: set[date] = set()
    for raw in selected_dates:
        d = parse_date(raw)
        if d is None:
            log.warning("invalid_date_skipped", value=str(raw))
            continue
        for week in range(max(weeks_ahead, 0) + 1):
            result.add(d + timedelta(weeks=week))
    return [format_date(d) for d in sorted(result)]


def get_weekly_order_days(orders: Iterable) -> set[str]:
    """정기 주문들의 정산 날짜에서 사용 중인 요일 추출"""
    days: set[str] = set()
    for order in orders:
        if not order.is_weekly_order:
            continue
        for s in order.settlements:
            label = get_day_of_week_from_date(s.date)
            if label:
                days.add(label)
    return days


def fix_sunday(d: date) -> date:
    """일요일로 잘못 저장된 날짜 -> 이틀 전 금요일. 그 외는 그대로"""
    if d.weekday() == 6:
        return d - timedelta(days=2)
    return d
