import time
import numpy as np
from chorddepth.tonal_depth import nearest_keys

def run_benchmark():
    # Setup
    np.random.seed(42)
    # 100,000 random chords of 3-7 pitch classes
    sizes = np.random.randint(3, 8, size=100000)
    chords = [np.random.choice(12, size=n, replace=False).tolist() for n in sizes]

    # Pre-warm
    nearest_keys(chords[0])

    # Benchmark
    start_time = time.perf_counter()
    for pcs in chords:
        nearest_keys(pcs)
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds ({len(chords)} chords)")

if __name__ == '__main__':
    run_benchmark()
