"""Numeric tolerances shared by every solver stage.

These values are part of the observable behaviour of the solver: changing any
of them changes which vertices are reported.
"""

# Boundary lines with |det| below this are parallel or coincident. Also the
# collinearity cut-off for the hull's turn test.
EPS = 1e-7

# Slack added to every half-plane right-hand side when testing a candidate.
# Looser than EPS to absorb rounding from the 2x2 solve.
FEASIBILITY_TOL = 1e-6

# Two vertices are the same when both coordinates differ by at most this.
DEDUP_TOL = 1e-7

# Values smaller than this in magnitude are shown as 0.
DISPLAY_SNAP = 1e-12
DISPLAY_DECIMALS = 4
