"""
hotel_core - 酒店预订核心

房间、客户与按日期区间的预订，保证同一房间不会在重叠日期内被重复预订。
"""

__version__ = "1.0.0"
