'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

# 兩個輸入的邏輯閘真值表，順序與訓練時一致
GATES = {
    'and': lambda a, b: a and b,
    'or': lambda a, b: a or b,
    'xor': lambda a, b: a != b,
    'nand': lambda a, b: not (a and b),
}

INPUTS = [(0, 0), (1, 0), (0, 1), (1, 1)]


def generate_gate(name):
    """
    產生邏輯閘的訓練資料。

    參數:
        name (str): 'and'、'or'、'xor' 或 'nand'。

    返回:
        list: (輸入向量, 理想輸出向量) 配對，皆為 float64 的 np.array。
    """
    try:
        gate = GATES[name.lower()]
    except KeyError:
        raise ValueError(f"不支援的資料集: {name}") from None

    examples = []
    for a, b in INPUTS:
        x = np.array([a, b], dtype=np.float64)
        y = np.array([1.0 if gate(bool(a), bool(b)) else 0.0])
        examples.append((x, y))
    return examples


def split_examples(examples):
    """把配對拆成 (X, y) 兩個矩陣，方便畫圖與計算準確率。"""
    X = np.array([inputs for inputs, _ in examples], dtype=np.float64)
    y = np.array([ideals for _, ideals in examples], dtype=np.float64)
    return X, y
