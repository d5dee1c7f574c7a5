'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import numpy as np

from .errors import DimensionMismatch, InvalidTopology
from .layers import Layer, Neuron, sigmoid_derivative
from .loss import SquaredError
from .optimizer import SGD
from .trainer import Trainer


class ForwardState:
    """
    一次前向傳播的暫存資料。

    accumulated[k][i] 是第 k 層第 i 個神經元的累加輸入，
    outputs[k][i] 是它的輸出，forced 是強制加在輸入層上的值。
    """
    def __init__(self, sizes, forced):
        self.accumulated = [np.zeros(size, dtype=np.float64) for size in sizes]
        self.outputs = []
        self.forced = forced

    @property
    def result(self):
        """輸出層的輸出 (依神經元編號排列)。"""
        return self.outputs[-1].copy()


class Network:
    """
    全連接的前饋神經網路，每條突觸各自帶有權重與偏置。
    """
    def __init__(self, layer_sizes=None, rng=None):
        self.layers = []
        if layer_sizes is not None:
            self.create_net(layer_sizes, rng)

    @property
    def sizes(self):
        return [len(layer) for layer in self.layers]

    def create_net(self, layer_sizes, rng=None):
        """
        依照每層的神經元數量建立網路。

        參數:
            layer_sizes (list[int]): 每層的神經元數量，第 0 個是輸入層，最後一個是輸出層。
            rng (np.random.Generator | int, optional): 亂數產生器或種子，用來初始化權重。
        """
        layer_sizes = list(layer_sizes)
        if len(layer_sizes) < 2:
            raise InvalidTopology(f"網路至少需要 2 層，收到 {len(layer_sizes)} 層")
        for size in layer_sizes:
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
                raise InvalidTopology(f"層大小必須是非負整數，收到 {size!r}")

        rng = np.random.default_rng(rng)
        self.layers = [Layer(int(size)) for size in layer_sizes]

        # 設定每個神經元的初始權重
        for i in range(len(self.layers) - 1):
            for neuron in self.layers[i]:
                neuron.init_weights(i + 1, self.layers[i + 1], rng)

    def recreate(self):
        """
        依位置重新連接所有突觸：第 L 層任一神經元的第 j 條突觸指向第 L+1 層的第 j 個神經元。
        在層/神經元物件被重建之後 (例如反序列化) 必須先呼叫。
        """
        for i in range(len(self.layers) - 1):
            next_size = len(self.layers[i + 1])
            for neuron in self.layers[i]:
                if len(neuron.synapses) > next_size:
                    raise InvalidTopology(
                        f"第 {i} 層神經元 {neuron.index} 有 {len(neuron.synapses)} 條突觸，"
                        f"但下一層只有 {next_size} 個神經元")
                for j, synapse in enumerate(neuron.synapses):
                    synapse.target = (i + 1, j)

    def neuron(self, target):
        """把 (層索引, 神經元索引) 解析成神經元物件。"""
        layer_index, neuron_index = target
        return self.layers[layer_index].neurons[neuron_index]

    def forward(self, inputs):
        """
        執行前向傳播。

        先把所有神經元的累加輸入歸零，再依層的順序，把每個神經元的
        output * weight + bias 加到每條突觸目標的累加輸入上。

        參數:
            inputs (array-like): 強制加在輸入層神經元上的值。

        返回:
            ForwardState: 這次傳播的暫存資料。
        """
        self._check_ready()
        forced = self._as_vector(inputs, len(self.layers[0]), "輸入")
        state = ForwardState(self.sizes, forced)

        for layer_index, layer in enumerate(self.layers):
            accumulated = state.accumulated[layer_index]
            outputs = np.array([
                Neuron.activate(accumulated[neuron.index],
                                forced[neuron.index] if layer_index == 0 else None)
                for neuron in layer
            ], dtype=np.float64)
            state.outputs.append(outputs)

            for neuron in layer:
                output = outputs[neuron.index]
                for synapse in neuron.synapses:
                    if synapse.target is None:
                        raise InvalidTopology("突觸沒有連線目標，請先呼叫 recreate()")
                    target_layer, target_index = synapse.target
                    state.accumulated[target_layer][target_index] += output * synapse.weight + synapse.bias
        return state

    def backward(self, state, ideals, optimizer, loss_fn=None):
        """
        執行反向傳播並更新每條突觸。

        從最後一層往前處理；權重是即時讀取的，所以第 k 層神經元的 delta
        使用的是第 k 層突觸剛被更新過的權重。每層的 delta 只計算一次。

        參數:
            state (ForwardState): forward() 的結果。
            ideals (array-like): 理想輸出。
            optimizer (Optimizer): 負責套用權重/偏置更新。
            loss_fn (Loss, optional): 輸出層誤差訊號，預設為 SquaredError。
        """
        loss_fn = loss_fn if loss_fn is not None else SquaredError()
        ideals = self._as_vector(ideals, len(self.layers[-1]), "理想輸出")
        deltas = [None] * len(self.layers)

        for layer_index in range(len(self.layers) - 2, -1, -1):
            deltas[layer_index + 1] = self._layer_deltas(layer_index + 1, state, ideals, deltas, loss_fn)
            outputs = state.outputs[layer_index]
            for neuron in self.layers[layer_index]:
                for synapse in neuron.synapses:
                    target_layer, target_index = synapse.target
                    delta = deltas[target_layer][target_index]
                    optimizer.update(synapse, outputs[neuron.index] * delta, delta)

    def _layer_deltas(self, layer_index, state, ideals, deltas, loss_fn):
        outputs = state.outputs[layer_index]
        result = np.zeros(len(outputs), dtype=np.float64)
        for neuron in self.layers[layer_index]:
            output = outputs[neuron.index]
            if not neuron.synapses:
                result[neuron.index] = loss_fn.grad(output, ideals[neuron.index])
                continue
            total = 0.0
            for synapse in neuron.synapses:
                target_layer, target_index = synapse.target
                total += synapse.weight * deltas[target_layer][target_index]
            result[neuron.index] = sigmoid_derivative(output) * total
        return result

    def run(self, inputs):
        """
        推論：前向傳播一次並回傳輸出層的值，不會更新權重。
        """
        return self.forward(inputs).result

    def predict(self, inputs):
        """回傳二元分類結果 (輸出 > 0.5 為 1)。"""
        return (self.run(inputs) > 0.5).astype(int)

    def train(self, examples, max_epochs, speed=0.7, moment=0.3, on_progress=None,
              log_interval=1000, tolerance=0.005, show_progress=False):
        """
        用 SGD + 動量訓練網路，回傳最後到達的 epoch。

        參數:
            examples (list): (輸入向量, 理想輸出向量) 的有序配對。
            max_epochs (int): 最多訓練的 epoch 數。
            speed (float): 學習率。
            moment (float): 動量係數。
            on_progress (callable, optional): 每 log_interval 個 epoch 以 (epoch, 平均誤差) 呼叫。

        返回:
            int: 收斂時為當下的 epoch 索引，否則為 max_epochs。
        """
        trainer = Trainer(self, SquaredError(), SGD(learning_rate=speed, momentum=moment))
        result = trainer.train(examples, max_epochs, log_interval=log_interval, tolerance=tolerance,
                               on_progress=on_progress, show_progress=show_progress)
        return result.final_epoch

    def check_example(self, inputs, ideals):
        """
        檢查一筆訓練資料的長度，回傳轉成 float64 的 (輸入, 理想輸出)。
        """
        self._check_ready()
        return (self._as_vector(inputs, len(self.layers[0]), "輸入"),
                self._as_vector(ideals, len(self.layers[-1]), "理想輸出"))

    def _check_ready(self):
        if not self.layers:
            raise InvalidTopology("網路尚未建立，請先呼叫 create_net()")

    @staticmethod
    def _as_vector(values, size, name):
        vector = np.asarray(values, dtype=np.float64)
        if vector.ndim != 1 or vector.shape[0] != size:
            raise DimensionMismatch(f"{name}向量長度應為 {size}，收到形狀 {vector.shape}")
        return vector

    def __setstate__(self, state):
        self.__dict__.update(state)
        self.recreate()

    def __repr__(self):
        return f"Network(sizes={self.sizes})"
