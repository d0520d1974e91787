"""
인버터별 월간 발전량 그룹 막대 차트 시스템
"""

__version__ = "1.0.0"
