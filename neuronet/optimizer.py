'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''


class Optimizer:
    """優化器的基礎類別"""
    def __init__(self, learning_rate):
        self.lr = learning_rate

    def update(self, synapse, gradient, delta):
        """更新單一突觸的權重"""
        raise NotImplementedError


class SGD(Optimizer):
    """
    隨機梯度下降 (Stochastic Gradient Descent) 優化器，附帶動量 (Momentum)。
    每個樣本更新一次 (online)，速度 (velocity) 直接存在突觸的 last_delta_weight 上。
    """
    def __init__(self, learning_rate=0.7, momentum=0.3):
        super().__init__(learning_rate)
        self.momentum = momentum

    def update(self, synapse, gradient, delta):
        """
        參數:
            synapse (Synapse): 要更新的突觸。
            gradient (float): 上游神經元輸出 * 目標神經元的 delta。
            delta (float): 目標神經元的 delta，直接加到偏置上。
        """
        delta_weight = self.lr * gradient + self.momentum * synapse.last_delta_weight
        synapse.last_delta_weight = delta_weight
        synapse.weight += delta_weight
        synapse.bias += delta
