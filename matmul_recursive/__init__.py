import azure.functions as func
import os, json, time

from divide_rule.quadrant_matrix import Matrix, multiply
from divide_rule.utils import get_logger, validate_matrices

MAX_MATRIX_DIM = int(os.getenv("MAX_MATRIX_DIM", "64"))  # recursion is O(N^3) python calls


def _json(payload: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(payload), status_code=status_code,
                             mimetype="application/json")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("matmul_recursive")
    try:
        req_body = req.get_json()
        if not isinstance(req_body, dict):
            raise ValueError("Request body must be a JSON object with matrix_a and matrix_b")
        A = Matrix.from_rows(req_body.get("matrix_a"))
        B = Matrix.from_rows(req_body.get("matrix_b"))
        validate_matrices(A, B)

        N = A.size
        if N > MAX_MATRIX_DIM:
            logger.warning(f"Rejected N={N} > MAX_MATRIX_DIM={MAX_MATRIX_DIM}")
            return _json({"error": f"matrix dimension {N} exceeds limit {MAX_MATRIX_DIM}"}, 413)

        t0 = time.time()
        C = multiply(A, B)
        t1 = time.time()

        logger.info(json.dumps({"mode": "inline", "N": N, "compute_sec": round(t1 - t0, 6)}))
        return _json({"result": C.tolist(), "n": N})
    except ValueError as e:
        logger.warning(f"Invalid request: {e}")
        return _json({"error": str(e)}, 400)
    except Exception as e:
        logger.exception("matmul_recursive: unhandled exception")
        return _json({"error": str(e)}, 500)
