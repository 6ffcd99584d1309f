#!/usr/bin/env python
import argparse
from linreg_gd.evaluate import run_predict

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, default="artifacts/linreg_gd.pkl")
    p.add_argument("features", type=float, nargs="*")
    args = p.parse_args()
    run_predict(args.model, args.features)
