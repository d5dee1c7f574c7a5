'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np


def sigmoid(value):
    """Sigmoid 活化函數 f(x) = 1 / (1 + e^-x)。"""
    return 1.0 / (1.0 + np.exp(-value))


def sigmoid_derivative(output):
    """
    Sigmoid 的導數，注意這裡傳入的是「輸出值」而不是輸入值：
        f'(x) = y * (1 - y)
    """
    return (1.0 - output) * output


class Synapse:
    """
    連接到下一層某個神經元的突觸 (帶權重與偏置)。

    target 是 (層索引, 神經元索引) 的配對，透過所屬的 Network 解析，
    而不是直接持有神經元物件。
    """
    def __init__(self, target, weight, bias=0.0):
        self.target = target
        self.weight = float(weight)
        self.bias = float(bias)
        self.last_delta_weight = 0.0

    def __getstate__(self):
        # 連線關係不序列化，載入後由 Network.recreate() 依位置重建
        state = self.__dict__.copy()
        state['target'] = None
        return state

    def __repr__(self):
        return f"Synapse(target={self.target}, weight={self.weight:.6f}, bias={self.bias:.6f})"


class Neuron:
    """
    神經元。只保存自己在層中的編號與往外連出的突觸；
    累加輸入、強制輸出等每次計算的暫存值放在 ForwardState 裡。
    """
    def __init__(self, index):
        self.index = index
        self.synapses = []

    def init_weights(self, layer_index, next_layer, rng):
        """
        對下一層的每個神經元各建立一條突觸。

        參數:
            layer_index (int): 下一層的層索引。
            next_layer (Layer): 下一層。
            rng (np.random.Generator): 權重初始化用的亂數產生器，權重取自 [-1, 1)。
        """
        for neuron in next_layer.neurons:
            self.synapses.append(Synapse((layer_index, neuron.index), rng.uniform(-1.0, 1.0), 0.0))

    @staticmethod
    def activate(accumulated, forced=None):
        """有強制輸出時直接回傳它，否則回傳 sigmoid(累加輸入)。"""
        if forced is not None:
            return float(forced)
        return float(sigmoid(accumulated))

    def __repr__(self):
        return f"Neuron(index={self.index}, synapses={len(self.synapses)})"


class Layer:
    """
    一層有序的神經元。
    """
    def __init__(self, size=0):
        self.neurons = [Neuron(i) for i in range(size)]

    def __len__(self):
        return len(self.neurons)

    def __iter__(self):
        return iter(self.neurons)

    def __repr__(self):
        return f"Layer(size={len(self.neurons)})"
