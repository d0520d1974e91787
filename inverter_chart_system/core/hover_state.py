"""
호버 상태 머신 (Idle <-> Hovering)
"""
import logging

from inverter_chart_system.core.models import IDLE, HoverState

logger = logging.getLogger(__name__)

IDLE_STATE = 'idle'
HOVERING_STATE = 'hovering'


class HoverStateMachine:
    """포인터 이동/이탈로만 바뀌는 호버 상태"""

    def __init__(self):
        self.hover = IDLE

    @property
    def state(self) -> str:
        return IDLE_STATE if self.hover.is_idle else HOVERING_STATE

    def pointer_move(self, target: HoverState) -> bool:
        """히트 테스트 결과로 전이, 상태가 바뀌었으면 True"""
        if target == self.hover:
            return False
        logger.debug("호버 전이: %s -> %s", self.hover, target)
        self.hover = target
        return True

    def pointer_leave(self) -> bool:
        return self.pointer_move(IDLE)

    def reset(self):
        self.hover = IDLE
