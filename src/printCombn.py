#!/usr/bin/python3

import sys
import hydra
from omegaconf import DictConfig
from combnPrinter import NUM_DIGITS, print_combinations


def print_all_combinations(stream=None, verbosity=0) -> None:
    for n in range(1, NUM_DIGITS):
        print_combinations(n, stream=stream, verbosity=verbosity)


@hydra.main(config_path="../config", config_name="print_combn", version_base=None)
def main(cfg: DictConfig) -> None:
    if cfg.verbosity >= 1:
        print("<printCombn>:", file=sys.stderr)
    print_all_combinations(verbosity=cfg.verbosity)


if __name__ == "__main__":
    main()
