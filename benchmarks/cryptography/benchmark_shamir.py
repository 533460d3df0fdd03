"""Benchmark Shamir split and reconstruct.

Compares sharing over the reals against sharing in GF(2^31 - 1)
across thresholds, for a batch of 32-byte secrets.
"""

import time
from typing import Optional

import torch

from torchshamir.cryptography import shamir_reconstruct, shamir_split
from torchshamir.finite_field import MERSENNE_PRIME_31


def benchmark_shamir(
    k: int,
    n_iterations: int = 100,
    modulus: Optional[int] = None,
    secret_len: int = 32,
) -> tuple[float, float]:
    """Benchmark split and reconstruct at given threshold.

    Parameters
    ----------
    k : int
        Threshold. 2k shares are issued and k are used to reconstruct.
    n_iterations : int
        Number of iterations for timing.
    modulus : int, optional
        Prime modulus, or None for the real domain.
    secret_len : int
        Number of secret elements shared at once.

    Returns
    -------
    tuple of float
        Average split and reconstruct times in milliseconds.
    """
    if modulus is None:
        secret = torch.rand(secret_len, dtype=torch.float64)
    else:
        secret = torch.randint(0, 256, (secret_len,))

    n = 2 * k

    # Warmup
    for _ in range(10):
        shares = shamir_split(secret, n, k, modulus=modulus)
        _ = shamir_reconstruct(shares[:k], k, modulus=modulus)

    start = time.perf_counter()
    for _ in range(n_iterations):
        shares = shamir_split(secret, n, k, modulus=modulus)
    split_elapsed = time.perf_counter() - start

    subset = shares[:k]
    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = shamir_reconstruct(subset, k, modulus=modulus)
    reconstruct_elapsed = time.perf_counter() - start

    return (
        split_elapsed / n_iterations * 1000,
        reconstruct_elapsed / n_iterations * 1000,
    )


def main():
    """Run sharing benchmarks across thresholds."""
    thresholds = [2, 3, 5, 8, 16, 32]

    print("Shamir's Secret Sharing Benchmark")
    print("=" * 70)
    print(
        f"{'k':>4} {'Real split':>14} {'Real recon':>14}"
        f" {'GF split':>14} {'GF recon':>14}"
    )
    print("-" * 70)

    for k in thresholds:
        real_split, real_recon = benchmark_shamir(k)
        field_split, field_recon = benchmark_shamir(
            k, modulus=MERSENNE_PRIME_31
        )
        print(
            f"{k:>4} {real_split:>14.4f} {real_recon:>14.4f}"
            f" {field_split:>14.4f} {field_recon:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Times in ms, 2k shares issued, k shares used for reconstruction")
    print("- GF(p) interpolation reduces after every product, O(k^2) loops")


if __name__ == "__main__":
    main()
