import time
from modecards.constants import SHARP_NAMES
from modecards.modes import compute_mode_results
from modecards.pitch import normalize_and_index

def run_benchmark(rounds=2000):
    tonics = [normalize_and_index(name) for name in SHARP_NAMES]

    # Pre-warm
    compute_mode_results(*tonics[0])

    start_time = time.perf_counter()
    for _ in range(rounds):
        for tonic, tonic_pc in tonics:
            compute_mode_results(tonic, tonic_pc)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds "
          f"({rounds * len(tonics)} tonics, {duration / (rounds * len(tonics)) * 1e6:.1f} µs each)")

if __name__ == '__main__':
    run_benchmark()
