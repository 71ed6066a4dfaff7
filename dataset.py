'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import matplotlib.pyplot as plt
import numpy as np


def generate_XOR():
    """XOR 真值表，4 筆資料。"""
    inputs = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
    labels = np.array([[0], [1], [1], [0]], dtype=float)
    return inputs, labels


def generate_linear(n=100):
    """
    在 [0, 1] x [0, 1] 中均勻取 n 個點，
    x > y 的點標為 0，其餘標為 1。
    """
    pts = np.random.uniform(0, 1, (n, 2))
    inputs = []
    labels = []
    for pt in pts:
        inputs.append([pt[0], pt[1]])
        if pt[0] > pt[1]:
            labels.append(0)
        else:
            labels.append(1)
    return np.array(inputs), np.array(labels, dtype=float).reshape(n, 1)


def generate_XOR_easy():
    """沿兩條對角線取點的 XOR 資料，共 21 筆。"""
    inputs = []
    labels = []
    for i in range(11):
        inputs.append([0.1 * i, 0.1 * i])
        labels.append(0)

        if 0.1 * i == 0.5:
            continue

        inputs.append([0.1 * i, 1 - 0.1 * i])
        labels.append(1)
    return np.array(inputs), np.array(labels, dtype=float).reshape(21, 1)


def plot_data(X, y, title="Data"):
    """繪製資料分布，紅色為 Class 0，藍色為 Class 1。"""
    plt.figure()
    plt.title(title, fontsize=16)
    plt.scatter(X[y.flatten() == 0][:, 0], X[y.flatten() == 0][:, 1], c='red', marker='o', label='Class 0')
    plt.scatter(X[y.flatten() == 1][:, 0], X[y.flatten() == 1][:, 1], c='blue', marker='x', label='Class 1')
    plt.xlabel("x1")
    plt.ylabel("x2")
    plt.legend()
    plt.grid(True)
    plt.show()
