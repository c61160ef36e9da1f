"""
주소 / 주문 테이블 쓰기 훅

모든 ORM 쓰기 경로에서 동일한 트랜잭션 안에 실행된다.

- 기본 주소 보장: 한 사용자당 is_default=True 주소는 최대 1개.
  새 기본 주소가 저장되기 전에 소유자 프로필 행을 잠그고(FOR UPDATE)
  같은 사용자의 다른 주소를 is_default=False 로 내린다. 부분 UNIQUE 인덱스
  (uq_addresses_single_default)가 최종 방어선이다.
- 주문 번호 발급: order_number 가 비어 있는 주문에 ORD-YYYYMMDD-NNNN 을 부여한다.
  일자별 카운터 행을 먼저 갱신해 행 잠금을 잡은 뒤 당일 최대 번호 + 1 을 계산하므로
  같은 날짜의 동시 발급이 직렬화된다. order_number 의 UNIQUE 제약이 최종 방어선이며
  충돌 시 재시도는 OrderService 에서 처리한다.
"""
import itertools
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import structlog
from sqlalchemy import event, inspect, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from storefront.core.config import settings
from storefront.models.address import Address
from storefront.models.base import generate_uuid, utcnow
from storefront.models.order import Order, OrderNumberCounter
from storefront.models.profile import Profile

logger = structlog.get_logger()

ORDER_NUMBER_PREFIX = "ORD"


def current_time() -> datetime:
    return datetime.now(timezone.utc)


def order_day(now: datetime = None) -> str:
    """주문 번호용 날짜 (ORDER_NUMBER_TIMEZONE 기준 YYYYMMDD)"""
    now = now or current_time()
    return now.astimezone(ZoneInfo(settings.ORDER_NUMBER_TIMEZONE)).strftime("%Y%m%d")


def order_number_prefix(day: str) -> str:
    return f"{ORDER_NUMBER_PREFIX}-{day}-"


def parse_order_suffix(order_number: str, prefix: str) -> int:
    """접두어 뒤 일련번호. 숫자가 아니면 0"""
    suffix = (order_number or "")[len(prefix):]
    if suffix.isascii() and suffix.isdigit():
        return int(suffix)
    return 0


def next_order_number(connection, day: str) -> str:
    """day 의 다음 주문 번호 발급 (호출한 트랜잭션 안에서 실행)"""
    counters = OrderNumberCounter.__table__
    orders = Order.__table__
    prefix = order_number_prefix(day)

    # 일자 카운터 행 갱신 = 행 잠금 (SQLite 는 쓰기 잠금)
    locked = connection.execute(
        update(counters)
        .where(counters.c.day == day)
        .values(last_value=counters.c.last_value)
    ).rowcount
    if not locked:
        # 동시에 같은 날짜 행을 만들면 PK 충돌로 실패 -> 상위에서 재시도
        connection.execute(counters.insert().values(day=day, last_value=0))

    last_value = connection.execute(
        select(counters.c.last_value).where(counters.c.day == day)
    ).scalar_one()
    existing = connection.execute(
        select(orders.c.order_number).where(
            orders.c.order_number.startswith(prefix, autoescape=True)
        )
    ).scalars()
    current = max((parse_order_suffix(number, prefix) for number in existing), default=0)

    # 같은 flush 에서 여러 주문이 발급될 때 카운터가 하한 역할
    value = max(current, last_value) + 1
    connection.execute(
        update(counters).where(counters.c.day == day).values(last_value=value)
    )
    return f"{prefix}{value:04d}"


@event.listens_for(Order, "before_insert")
def set_order_number(mapper, connection, target):
    if target.order_number:
        return
    target.order_number = next_order_number(connection, order_day())
    logger.info("Order number allocated", order_number=target.order_number, user_id=target.user_id)


@event.listens_for(Address, "before_insert")
@event.listens_for(Address, "before_update")
def ensure_single_default_address(mapper, connection, target):
    if not target.is_default:
        return
    if target.id is None:
        target.id = generate_uuid()

    addresses = Address.__table__
    profiles = Profile.__table__
    # 소유자 프로필 행을 잠가 같은 사용자의 기본 주소 변경을 직렬화 (주소가 아직 없어도 행은 존재)
    connection.execute(
        select(profiles.c.id)
        .where(profiles.c.id == target.user_id)
        .with_for_update()
    ).all()
    cleared = connection.execute(
        update(addresses)
        .where(
            addresses.c.user_id == target.user_id,
            addresses.c.id != target.id,
            addresses.c.is_default.is_(True),
        )
        .values(is_default=False, updated_at=utcnow())
    ).rowcount
    if cleared:
        logger.info("Previous default address cleared", user_id=target.user_id, address_id=target.id, cleared=cleared)

    # 세션에 로드된 다른 주소 객체도 DB 상태와 맞춤
    session = Session.object_session(target)
    if session is not None:
        for obj in list(session.identity_map.values()):
            # 만료된 속성은 다음 접근 때 DB에서 다시 읽으므로 건너뜀
            loaded = obj.__dict__
            if (
                isinstance(obj, Address)
                and obj is not target
                and loaded.get("user_id") == target.user_id
                and loaded.get("is_default")
                and obj not in session.dirty
            ):
                set_committed_value(obj, "is_default", False)


_default_set_sequence = itertools.count(1)


@event.listens_for(Address.is_default, "set")
def record_default_set(target, value, oldvalue, initiator):
    # is_default=True 로 지정된 순서 기록 (flush 충돌 시 가장 나중 것이 이김)
    if value:
        inspect(target).info["default_set_seq"] = next(_default_set_sequence)


@event.listens_for(Session, "before_flush")
def resolve_pending_defaults(session, flush_context, instances):
    """한 flush 안에서 같은 사용자의 기본 주소가 여러 개면 가장 나중에 지정된 것만 유지

    DB 에서 읽은 뒤 다시 지정하지 않은 기본 주소는 새로 지정된 주소에 밀린다.
    """
    candidates = {}
    for obj in list(session.dirty) + list(session.new):
        if isinstance(obj, Address) and obj.is_default:
            candidates.setdefault(obj.user_id, []).append(obj)

    for addresses in candidates.values():
        if len(addresses) < 2:
            continue
        addresses.sort(key=lambda obj: inspect(obj).info.get("default_set_seq", 0))
        for obj in addresses[:-1]:
            obj.is_default = False
