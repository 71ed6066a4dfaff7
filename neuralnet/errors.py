'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''

class NetworkError(Exception):
    """神經網路相關錯誤的基礎類別。"""


class ShapeMismatchError(NetworkError, ValueError):
    """
    矩陣形狀不相容。
    例如 dot 時 columns(a) != rows(b)，或逐元素運算時兩個矩陣形狀不同。
    """


class InvalidConfigurationError(NetworkError, ValueError):
    """學習率、訓練次數或隱藏層節點數等設定不合法。"""
