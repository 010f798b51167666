"""
二十一点游戏异常定义
区分可恢复的输入问题(由界面层处理)和不变量被破坏的致命错误(向上抛)
"""


class BlackjackError(Exception):
    """二十一点游戏基础异常类"""
    pass


class DeckExhaustedError(BlackjackError, IndexError):
    """牌组已发完异常，回合内出现即视为逻辑错误"""
    pass


class InvalidDeckError(BlackjackError, ValueError):
    """牌组构成无效异常（张数不对或存在重复牌）"""
    pass


class RoundStateError(BlackjackError):
    """当前回合阶段不允许该操作"""
    pass


class GameConfigError(BlackjackError):
    """游戏配置错误异常"""
    pass
