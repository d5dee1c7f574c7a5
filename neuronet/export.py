'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''


def format_float(value):
    """最短可還原的十進位表示，整數值不帶 '.0'。"""
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


def matrix_to_string(network, is_long):
    """
    把所有突觸的 (bias, weight) 輸出成圖表腳本的陣列宣告。

    走訪順序：層 -> 神經元 -> 突觸，每條突觸先寫 bias 再寫 weight。
    開頭是配置陣列的敘述，長度為 (突觸數 * 2) + 1。

    參數:
        network (Network): 已建立的網路。
        is_long (bool): True 時變數名稱為 dataLong，否則為 dataShort。

    返回:
        str
    """
    name = f"data{'Long' if is_long else 'Short'}"
    lines = []
    data = 0
    for layer in network.layers:
        for neuron in layer:
            for synapse in neuron.synapses:
                lines.append(f"array.set({name}, {data}, {format_float(synapse.bias)})\n")
                data += 1
                lines.append(f"array.set({name}, {data}, {format_float(synapse.weight)})\n")
                data += 1

    return f"{name} = array.new_float({data + 1}, 0)\n" + ''.join(lines)
