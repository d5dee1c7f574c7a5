'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import sys


def parse_line(line):
    """把以空白分隔的數字轉成 float 串列。"""
    return [float(token) for token in line.split()]


def interactive_loop(network, stream=None, out=None):
    """
    互動模式：每讀一行就推論一次，並印出第一個輸出值。
    空白行或 EOF 結束；無法解析或長度不符時印出錯誤並繼續。

    返回:
        int: 成功推論的次數。
    """
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout

    count = 0
    for line in stream:
        if not line.strip():
            break
        try:
            values = parse_line(line)
            result = network.run(values)
        except ValueError as e:
            print(f"輸入錯誤: {e}", file=out)
            continue
        # 輸出層沒有神經元時印出空串列
        print(result[0] if len(result) else [], file=out)
        count += 1
    return count
