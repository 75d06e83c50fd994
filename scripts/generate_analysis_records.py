import pandas as pd
import numpy as np
import datetime
import random
import os

# Simulation Configuration
NUM_FRAMES = 1440
RUSH_HOURS = [7, 8, 9, 17, 18, 19, 20]
MALFORMED_RATE = 0.01

def generate_records(num_frames=NUM_FRAMES, day=datetime.date(2024, 1, 1), seed=None):
    """
    Synthetic per-image analysis rows, shaped like the detection API output:
    minute_bucket / created_at / processed_at as SQLite text, total_vehicles as a number.
    """
    rng = np.random.default_rng(seed)
    random.seed(seed)
    start = datetime.datetime.combine(day, datetime.time())

    rows = []
    for _ in range(num_frames):
        captured = start + datetime.timedelta(seconds=int(rng.integers(0, 86400)))
        processed = captured + datetime.timedelta(seconds=int(rng.integers(1, 30)))

        # More vehicles in frame during rush hour
        if captured.hour in RUSH_HOURS:
            total_vehicles = int(rng.poisson(25))
        else:
            total_vehicles = int(rng.poisson(6))

        row = {
            "minute_bucket": captured.strftime("%Y-%m-%d %H:%M:00"),
            "created_at": captured.strftime("%Y-%m-%d %H:%M:%S"),
            "processed_at": processed.strftime("%Y-%m-%d %H:%M:%S"),
            "total_vehicles": total_vehicles,
        }

        # Some rows arrive without the minute aggregate, a few are broken
        if random.random() < 0.2:
            row["minute_bucket"] = None
        if random.random() < MALFORMED_RATE:
            row["minute_bucket"] = None
            row["created_at"] = "not-a-date"
            row["processed_at"] = None
        elif random.random() < MALFORMED_RATE:
            row["total_vehicles"] = -1

        rows.append(row)

    return rows

def generate_data(output_file="data/analytics/vehicle_counts_synthetic.json", num_frames=NUM_FRAMES, seed=None):
    print(f"Generating {num_frames} synthetic analysis records...")
    df = pd.DataFrame(generate_records(num_frames, seed=seed))
    df = df.sort_values(by="created_at")

    print(df.head())

    # Ensure output directory exists
    os.makedirs(os.path.dirname(output_file), exist_ok=True)

    if output_file.endswith(".csv"):
        df.to_csv(output_file, index=False)
    else:
        df.to_json(output_file, orient="records", indent=2)
    print(f"Dataset saved to {output_file}")

if __name__ == "__main__":
    generate_data()
