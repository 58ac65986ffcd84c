"""
This example builds the second difference operator on a uniform grid as a TridiagonalMatrix, checks it against the
equivalent dense matrix, and uses its banded layout for an implicit heat equation step
"""
import numpy as np
from scipy.linalg import solve_banded
import matplotlib.pyplot as plt

from tridiag.matrix.Equality import equal
from tridiag.matrix.TridiagonalMatrix import TridiagonalMatrix

# ============================
# Set Grid
# ============================
N = 50  # Number of interior grid points
dx = 1. / (N + 1)
dt = 1e-3
x = np.linspace(dx, 1 - dx, N)

# ============================
# Build Operators
# ============================
D2 = TridiagonalMatrix(n=N,
                       lower=np.ones(N - 1) / dx ** 2,
                       diag=-2 * np.ones(N) / dx ** 2,
                       upper=np.ones(N - 1) / dx ** 2)

dense = np.diag(-2 * np.ones(N)) + np.diag(np.ones(N - 1), k=-1) + np.diag(np.ones(N - 1), k=1)
print(f"Matches dense operator: {equal(D2, dense / dx ** 2)}")
print(f"Bandwidth: {D2.bandwidth()}")

# Implicit Euler: (I - dt * D2) u_{t+1} = u_t
A = TridiagonalMatrix(n=N, lower=-dt * D2.lower, diag=1 - dt * D2.diag, upper=-dt * D2.upper)

u = np.sin(np.pi * x)
for _ in range(100):
    u = solve_banded(A.bandwidth(), A.to_banded(), u)

exact = np.exp(-np.pi ** 2 * 100 * dt) * np.sin(np.pi * x)
print(f"Max error vs exact decay: {np.max(np.abs(u - exact)):.2e}")

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))
ax1.spy(D2.to_sparse())
ax1.set_title('Sparsity of D2')
ax2.plot(x, u, label='implicit Euler')
ax2.plot(x, exact, '--', label='exact')
ax2.legend()
plt.show()
