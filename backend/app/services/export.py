"""배송일별 주문 목록 Excel 생성"""
import io
from datetime import date

from openpyxl import Workbook

from app.models import Order

EXCEL_HEADERS = ["주문번호", "이름", "연락처", "수령 장소", "결제 방법", "알레르기", "정기 주문", "정산"]
PAYMENT_LABELS = {"cash": "현금", "bank_transfer": "계좌이체"}


def build_delivery_workbook(orders: list[Order], target: date) -> io.BytesIO:
    wb = Workbook()
    ws = wb.active
    ws.title = target.isoformat()
    ws.append(EXCEL_HEADERS)
    for o in orders:
        settlement = o.find_settlement(target)
        ws.append([
            o.id,
            o.customer_name or "",
            o.contact or "",
            o.location or "",
            PAYMENT_LABELS.get(o.payment_method or "", o.payment_method or ""),
            o.allergies or "",
            "Y" if o.is_weekly_order else "",
            "완료" if settlement and settlement.is_settled else "미정산",
        ])
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf
