# first line: 87
@persistent_cache
def fisher_approximate_zero(lam: float = 50, N: int = 100, tolerance: float = 1e-10) -> np.ndarray:
    """
    Newton solution of :func:`fisher_example`, cached on disk.
    """
    model, params, x0 = fisher_example(lam=lam, N=N)
    return newton_solve(model, x0, params, tolerance=tolerance, norm=model.default_norm())
