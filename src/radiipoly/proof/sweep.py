"""
Utils for proving many independent problems, e.g a sweep over a parameter.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict
from typing import Callable, Sequence

import numpy as np
import pandas as pd
from tqdm import tqdm

from radiipoly.model import VectorField
from radiipoly.proof.proof import prove

RESULT_COLUMNS = ["success", "r0", "y0", "z0", "z2", "r1", "r2", "reason"]


def _run_proof(job):
    model, params, x0, kwargs = job
    result = prove(model, params, x0, **kwargs)
    return {k: getattr(result, k) for k in RESULT_COLUMNS}


def prove_many(
    model: VectorField,
    params_list: Sequence,
    initial_guess: Callable | Sequence[float] | np.ndarray,
    max_workers: int | None = None,
    verbose: bool = False,
    **kwargs,
) -> pd.DataFrame:
    """Proves one zero per parameter set. Runs share no state and are executed on a thread pool.

    Args:
        model (VectorField): the vector field, shared (read-only) by all runs.
        params_list (Sequence): parameter sets.
        initial_guess (Callable | array): a single initial guess, or a function params -> initial guess.
        max_workers (int | None, optional): threads. Defaults to the ThreadPoolExecutor default.
        verbose (bool, optional): show a progress bar. Defaults to False.
        **kwargs: passed to :func:`~radiipoly.proof.prove` (norm, tolerance, rigorous, ...).

    Returns:
        pd.DataFrame: one row per parameter set, parameter columns followed by the proof results.

    Note:
        Errors of a single run (e.g ConvergenceError) propagate and abort the sweep.
    """
    params_list = [model.parameters(p) for p in params_list]

    def guess(params):
        return initial_guess(params) if callable(initial_guess) else initial_guess

    jobs = [(model, params, guess(params), kwargs) for params in params_list]

    # parallelize:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        rows = list(tqdm(executor.map(_run_proof, jobs), total=len(jobs), disable=not verbose))

    params_df = pd.DataFrame([asdict(p) for p in params_list])
    results_df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    return pd.concat([params_df, results_df], axis=1)
