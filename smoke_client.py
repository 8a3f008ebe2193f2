import os
import json

import requests

# Configuration
API_URL = os.getenv("SMOKE_API_URL", "http://localhost:7071/api")  # func host start
TIMEOUT = 30


def post_max_subarray(sequence, low=None, high=None, api_url=API_URL):
    payload = {"sequence": sequence}
    if low is not None:
        payload["low"] = low
    if high is not None:
        payload["high"] = high
    response = requests.post(f"{api_url}/max_subarray", json=payload, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


def post_matmul(matrix_a, matrix_b, api_url=API_URL):
    payload = {"matrix_a": matrix_a, "matrix_b": matrix_b}
    response = requests.post(f"{api_url}/matmul_recursive", json=payload, timeout=TIMEOUT)
    response.raise_for_status()
    return response.json()


if __name__ == "__main__":
    from generate_dataset import generate_sequence, generate_matrix_pair

    sequence = generate_sequence(100)
    result = post_max_subarray(sequence)
    print(f"left is {result['start']}, right is {result['end']}, sum is {result['sum']}")

    matrix_a, matrix_b = generate_matrix_pair(4)
    print("Matrix A:", matrix_a)
    print("Matrix B:", matrix_b)
    print("Result Matrix:")
    print(json.dumps(post_matmul(matrix_a, matrix_b), indent=2))
