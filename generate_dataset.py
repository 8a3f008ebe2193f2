# divide-rule-functions/generate_dataset.py
import json

import numpy as np


def generate_sequence(length, low=-100, high=100, seed=None):
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=length, endpoint=True).tolist()


def generate_matrix_pair(n, low=-100, high=100, seed=None):
    rng = np.random.default_rng(seed)
    matrix_a = rng.integers(low, high, size=(n, n), endpoint=True).tolist()
    matrix_b = rng.integers(low, high, size=(n, n), endpoint=True).tolist()
    return matrix_a, matrix_b


def build_payloads(experiments, repeats=10, seed=None):
    rng = np.random.default_rng(seed)
    payloads = {"max_subarray": [], "matmul_recursive": []}
    for exp in experiments:
        for _ in range(repeats):
            child = int(rng.integers(0, 2**31))
            if "length" in exp:
                payloads["max_subarray"].append({"sequence": generate_sequence(exp["length"], seed=child)})
            if "n" in exp:
                matrix_a, matrix_b = generate_matrix_pair(exp["n"], seed=child)
                payloads["matmul_recursive"].append({"matrix_a": matrix_a, "matrix_b": matrix_b})
    return payloads


def save_payloads(file_path, experiments, repeats=10, seed=None):
    payloads = build_payloads(experiments, repeats=repeats, seed=seed)
    with open(file_path, mode="w") as file:
        json.dump(payloads, file)
    return payloads


if __name__ == "__main__":
    experiments = [
        {"length": 100, "n": 4},
        {"length": 1000, "n": 8},
        {"length": 10000, "n": 16},
        {"n": 32},
    ]
    save_payloads("divide_rule_dataset.json", experiments)
