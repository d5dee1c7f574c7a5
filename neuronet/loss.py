'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

from .layers import sigmoid_derivative


class Loss:
    def loss(self, predicted, actual):
        raise NotImplementedError("loss() 尚未實作")

    def grad(self, predicted, actual):
        raise NotImplementedError("grad() 尚未實作")


class SquaredError(Loss):
    """
    單一樣本的平方誤差 sum((ideal - output)^2)。
    一個 epoch 的平均誤差由 Trainer 除以樣本數得到。
    """
    def loss(self, predicted, actual):
        """
        計算平方誤差總和 (依神經元編號對齊，由左到右逐項相加)。
        """
        predicted = np.asarray(predicted, dtype=np.float64)
        actual = np.asarray(actual, dtype=np.float64)
        total = 0.0
        for i in range(len(actual)):
            total += (actual[i] - predicted[i]) ** 2
        return float(total)

    def grad(self, predicted, actual):
        """
        輸出層的誤差訊號 (delta)：(ideal - output) * sigmoid'(output)。
        """
        return (actual - predicted) * sigmoid_derivative(predicted)
