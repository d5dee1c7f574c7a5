'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import matplotlib.pyplot as plt
import numpy as np

from neuronet.dataset import split_examples


def plot_loss_curve(loss_history, path=None):
    """
    繪製訓練誤差曲線。

    參數:
        loss_history (list): 每個 epoch 平均誤差的列表。
        path (str, optional): 指定時存成圖檔，否則直接顯示。
    """
    fig = plt.figure()
    plt.plot(loss_history)
    plt.title("Training Error Curve")
    plt.xlabel("Epoch")
    plt.ylabel("Mean squared error")
    plt.grid(True)
    if path:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()


def show_result(network, examples):
    """
    印出每筆輸入的理想輸出與預測值，並計算準確率。

    返回:
        float: 四捨五入後預測正確的百分比。
    """
    X, y_true = split_examples(examples)
    outputs = np.array([network.run(x) for x in X])
    y_pred = np.array([network.predict(x) for x in X])

    for x, ideal, output in zip(X, y_true, outputs):
        print(f"{x} -> ideal: {ideal}, prediction: {np.round(output, 4)}")

    accuracy = np.mean(y_pred == y_true) * 100
    print(f"Accuracy: {accuracy:.2f}%")
    return accuracy
