'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import matplotlib.pyplot as plt
import numpy as np


def print_predictions(network, y_true):
    """
    逐筆印出輸出層的預測值與真實標籤。
    需在 feed_forward 之後呼叫，使用 network.layers[-1] 目前的值。
    """
    predictions = network.layers[-1]
    for i, (pred, target) in enumerate(zip(predictions, y_true)):
        print(f"Iter{i:>3} |  Ground truth: {np.round(target, 1)} |  Prediction: {np.round(pred, 5)}")


def show_result(network, X, y_true, plot=True):
    """
    視覺化比較真實標籤和預測結果，並計算準確率。

    參數:
        network: 訓練好的 Network 物件。
        X (np.array): 輸入資料 (需與訓練時相同的樣本數或更少)。
        y_true (np.array): 真實標籤。
        plot (bool): 是否畫圖。

    返回:
        float: 準確率 (0~100)。
    """
    network.load_input(X)
    network.feed_forward()
    y_pred = (network.layers[-1] > 0.5).astype(int)

    if plot:
        plt.figure(figsize=(12, 6))

        # 繪製真實標籤
        plt.subplot(1, 2, 1)
        plt.title("Ground Truth", fontsize=16)
        plt.scatter(X[y_true.flatten() == 0][:, 0], X[y_true.flatten() == 0][:, 1], c='red', marker='o', label='Class 0')
        plt.scatter(X[y_true.flatten() == 1][:, 0], X[y_true.flatten() == 1][:, 1], c='blue', marker='x', label='Class 1')
        plt.xlabel("x1")
        plt.ylabel("x2")
        plt.legend()
        plt.grid(True)

        # 繪製預測結果
        plt.subplot(1, 2, 2)
        plt.title("Prediction", fontsize=16)
        plt.scatter(X[y_pred.flatten() == 0][:, 0], X[y_pred.flatten() == 0][:, 1], c='red', marker='o', label='Class 0')
        plt.scatter(X[y_pred.flatten() == 1][:, 0], X[y_pred.flatten() == 1][:, 1], c='blue', marker='x', label='Class 1')
        plt.xlabel("x1")
        plt.ylabel("x2")
        plt.legend()
        plt.grid(True)

        plt.tight_layout()
        plt.show()

    accuracy = np.mean(y_pred == y_true) * 100
    print(f"Accuracy: {accuracy:.2f}%")
    return float(accuracy)
