import argparse
import csv
import random

NUM_HUMANS = 500
NUM_BOTS = 300
OUTPUT_FILE = "synthetic_captcha_data.csv"

FIELDS = ["time", "input", "keystrokes", "clicks", "typing_speed", "label"]
ALPHABET = "abcdefghjkmnpqrstuvwxyz23456789"


def _captcha_text(rng, length):
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def generate_human(rng):
    text = _captcha_text(rng, rng.randint(5, 8))
    solve_time = round(rng.uniform(2.0, 25.0), 3)
    return {
        "time": solve_time,
        "input": text,
        # humans mistype and backspace
        "keystrokes": len(text) + rng.randint(1, 4),
        "clicks": rng.randint(1, 3),
        "typing_speed": round(rng.uniform(1.5, 8.0), 3),
        "label": 1,
    }


def generate_bot(rng):
    text = _captcha_text(rng, rng.randint(5, 8))
    return {
        "time": round(rng.uniform(0.1, 1.2), 3),
        "input": text,
        "keystrokes": rng.choice([0, len(text)]),
        "clicks": rng.choice([0, 0, 1]),
        "typing_speed": round(rng.uniform(20.0, 80.0), 3),
        "label": 0,
    }


def write_dataset(path, num_humans=NUM_HUMANS, num_bots=NUM_BOTS, seed=None):
    rng = random.Random(seed)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for _ in range(num_humans):
            writer.writerow(generate_human(rng))
        for _ in range(num_bots):
            writer.writerow(generate_bot(rng))
    return num_humans + num_bots


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate labelled synthetic CAPTCHA telemetry")
    parser.add_argument("--output", default=OUTPUT_FILE)
    parser.add_argument("--humans", type=int, default=NUM_HUMANS)
    parser.add_argument("--bots", type=int, default=NUM_BOTS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rows = write_dataset(args.output, args.humans, args.bots, args.seed)
    print(f"Synthetic data generated: {rows} rows -> {args.output}")


if __name__ == "__main__":
    main()
