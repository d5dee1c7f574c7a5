'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''

# 進度條函式庫
from tqdm import tqdm

from .errors import DimensionMismatch


class TrainingResult:
    """
    訓練結果。

    final_epoch: 收斂時為當下的 epoch 索引，跑完全部 epoch 時為 max_epochs。
    loss_history: 每個 epoch 的平均誤差。
    """
    def __init__(self, final_epoch, loss_history, converged):
        self.final_epoch = final_epoch
        self.loss_history = loss_history
        self.converged = converged

    def __repr__(self):
        return (f"TrainingResult(final_epoch={self.final_epoch}, converged={self.converged}, "
                f"error={self.loss_history[-1] if self.loss_history else None})")


class Trainer:
    """
    訓練器類別，負責執行模型的訓練迴圈。
    每個樣本都做一次前向 + 反向傳播 (online 更新，不做 batch)。
    """
    def __init__(self, model, loss_fn, optimizer):
        """
        初始化訓練器。

        參數:
            model (Network): 要訓練的網路。
            loss_fn: 使用的損失函數物件。
            optimizer: 使用的優化器物件。
        """
        self.model = model
        self.loss_fn = loss_fn
        self.optimizer = optimizer

    def train(self, examples, epochs, log_interval=1000, tolerance=0.005, on_progress=None,
              show_progress=True):
        """
        執行訓練迴圈。

        參數:
            examples (list): (輸入向量, 理想輸出向量) 配對。
            epochs (int): 最多訓練的週期數。
            log_interval (int): 每隔多少個 epoch 呼叫一次 on_progress (含第 0 個)。
            tolerance (float): 平均誤差低於此值即停止。
            on_progress (callable, optional): on_progress(epoch, error)。
            show_progress (bool): 是否顯示 tqdm 進度條。

        返回:
            TrainingResult
        """
        if log_interval <= 0:
            raise ValueError(f"log_interval 必須是正整數，收到 {log_interval}")
        # 訓練前先檢查全部樣本，避免訓練到一半才發現長度不符
        examples = [self.model.check_example(inputs, ideals) for inputs, ideals in examples]
        if not examples:
            raise DimensionMismatch("訓練集不能是空的")

        loss_history = []
        converged = False
        epoch = 0
        with tqdm(range(epochs), desc="Training Progress", disable=not show_progress) as progress:
            for epoch in progress:
                error = 0.0
                for inputs, ideals in examples:
                    # 1. 前向傳播
                    state = self.model.forward(inputs)
                    # 2. 反向傳播並更新權重
                    self.model.backward(state, ideals, self.optimizer, self.loss_fn)
                    # 3. 累計誤差 (使用這次前向傳播的輸出)
                    error += self.loss_fn.loss(state.outputs[-1], ideals)
                error /= len(examples)
                loss_history.append(error)

                if epoch % log_interval == 0:
                    progress.set_postfix(error=f"{error:.6f}")
                    if on_progress is not None:
                        on_progress(epoch, error)

                if error < tolerance:
                    converged = True
                    break
            else:
                epoch = epochs

        return TrainingResult(epoch, loss_history, converged)
