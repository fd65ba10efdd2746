#!/usr/bin/env python3
# scripts/00_generate_synthetic_data.py

import os
import sys
import yaml

# add src/ to sys.path so we can import groupcompare without installing
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from groupcompare.generate_synthetic.synthetic_data import simulate_groups

# resolve paths relative to repo root
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

def load_config(path="scripts/config/generate_synthetic_data.yaml"):
    config_path = os.path.join(REPO_ROOT, path)
    with open(config_path, "r") as f:
        return yaml.safe_load(f)

def main():
    print("[INFO] Loading config...")
    config = load_config()
    seed = config["random_seed"]

    out_dir = os.path.join(REPO_ROOT, config["output_dir"])
    os.makedirs(out_dir, exist_ok=True)
    print(f"[INFO] Output directory: {out_dir}")

    spec = {group: tuple(dist) for group, dist in config["groups"].items()}
    n = config["n_per_group"]
    print(f"[INFO] Simulating {n} observations for groups {list(spec)}...")
    df = simulate_groups(n=n, seed=seed, spec=spec)

    out_path = os.path.join(out_dir, config["output_file"])
    df.to_csv(out_path, index=False)
    print(f"[INFO] Saved {len(df)} rows -> {out_path}")

if __name__ == "__main__":
    main()
