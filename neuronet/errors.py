'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''


class NeuroNetError(Exception):
    """NeuroNet 所有錯誤的基礎類別。"""


class InvalidTopology(NeuroNetError, ValueError):
    """網路結構不合法 (層數少於 2、層大小為負數，或尚未建立網路)。"""


class DimensionMismatch(NeuroNetError, ValueError):
    """輸入/理想輸出向量長度與網路不符，或訓練集為空。"""
