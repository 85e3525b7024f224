import argparse
import json

import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix, precision_score, recall_score

from behaviorguard.backend.errors import EvaluationError
from behaviorguard.backend.scorer import evaluate

DATA_FILE = "synthetic_captcha_data.csv"
TELEMETRY_COLUMNS = ["time", "input", "keystrokes", "clicks", "typing_speed"]


def predict(records):
    """1 = human, 0 = bot. Rows the scorer cannot read fail open, as in production."""
    predictions = []
    failures = 0
    for record in records:
        outcome = evaluate(record, sink=None)
        if isinstance(outcome, EvaluationError):
            failures += 1
            predictions.append(1)
        else:
            predictions.append(int(outcome.is_human_like))
    return predictions, failures


def evaluate_dataset(path):
    data = pd.read_csv(path, dtype={"input": str}, keep_default_na=False)

    y = data["label"].tolist()
    records = data[TELEMETRY_COLUMNS].to_dict(orient="records")
    y_pred, failures = predict(records)

    tn, fp, fn, tp = confusion_matrix(y, y_pred, labels=[0, 1]).ravel()
    return {
        "rows": len(y),
        "accuracy": float(accuracy_score(y, y_pred)),
        "human_precision": float(precision_score(y, y_pred, zero_division=0)),
        "human_recall": float(recall_score(y, y_pred, zero_division=0)),
        "confusion": {
            "bots_blocked": int(tn),
            "bots_passed": int(fp),
            "humans_blocked": int(fn),
            "humans_passed": int(tp),
        },
        "fail_open": failures,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Score labelled telemetry with the heuristic rules")
    parser.add_argument("data", nargs="?", default=DATA_FILE)
    args = parser.parse_args(argv)

    report = evaluate_dataset(args.data)
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
