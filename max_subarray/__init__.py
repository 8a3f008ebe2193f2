import azure.functions as func
import os, json, time

from divide_rule.max_subarray import find_max_subarray
from divide_rule.utils import get_logger

MAX_SEQUENCE_LENGTH = int(os.getenv("MAX_SEQUENCE_LENGTH", "100000"))


def _json(payload: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(payload), status_code=status_code,
                             mimetype="application/json")


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = get_logger("max_subarray")
    try:
        req_body = req.get_json()
        if not isinstance(req_body, dict):
            raise ValueError("Request body must be a JSON object with a sequence")
        sequence = req_body.get("sequence")
        if not isinstance(sequence, list):
            raise ValueError("sequence must be a JSON array of integers")
        if len(sequence) > MAX_SEQUENCE_LENGTH:
            logger.warning(f"Rejected length={len(sequence)} > MAX_SEQUENCE_LENGTH={MAX_SEQUENCE_LENGTH}")
            return _json({"error": f"sequence length {len(sequence)} exceeds limit {MAX_SEQUENCE_LENGTH}"}, 413)

        low = req_body.get("low", 0)
        high = req_body.get("high", len(sequence) - 1)
        # JSON true/false arrive as bool, which is an int subclass
        if any(isinstance(x, bool) or not isinstance(x, int) for x in (low, high)):
            raise ValueError("low and high must be integers")
        if any(isinstance(v, bool) for v in sequence):
            raise ValueError("sequence must contain integers, not booleans")

        t0 = time.time()
        start, end, total = find_max_subarray(sequence, low, high)
        t1 = time.time()

        logger.info(json.dumps({"length": len(sequence), "low": low, "high": high,
                                "start": start, "end": end, "sum": total,
                                "compute_sec": round(t1 - t0, 6)}))
        return _json({"start": start, "end": end, "sum": total})
    except ValueError as e:
        logger.warning(f"Invalid request: {e}")
        return _json({"error": str(e)}, 400)
    except Exception as e:
        logger.exception("max_subarray: unhandled exception")
        return _json({"error": str(e)}, 500)
