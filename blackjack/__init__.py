"""
Console Blackjack

单人控制台二十一点游戏：牌组模型、洗牌发牌、回合状态机与命令行界面。
"""

__version__ = "1.0.0"
__author__ = "Blackjack Development Team"
