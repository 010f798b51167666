"""二十一点用户界面层."""
