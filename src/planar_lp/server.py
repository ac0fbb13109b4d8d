from __future__ import annotations

import os

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .lp.diagnostics import analyze_infeasibility, cross_check_with_highs
from .lp.graphical import solve_planar
from .lp.parser import parse_planar_problem
from .lp.utils import format_vertices, plot_bounds
from .schemas import PlanarProblem, SolveOptions

app = FastMCP("Planar LP")


@app.tool()
def solve_planar_lp(problem: PlanarProblem, options: SolveOptions | None = None) -> dict:
    """
    Solve a two-variable LP by enumerating constraint-boundary intersections.

    Returns the solution JSON plus a readable vertex listing and a plot window
    (min_x, max_x, min_y, max_y) that frames the feasible vertices.
    """
    opts = options or SolveOptions()
    solution = solve_planar(problem, opts)
    result = solution.model_dump()
    if solution.status == "invalid":
        return result
    result["vertex_listing"] = format_vertices(solution.vertices or [])
    result["plot_bounds"] = plot_bounds(solution.vertices or solution.hull or [], problem.constraints)
    return result


@app.tool()
def parse_planar_spec(spec: str) -> dict:
    """Parse "maximize 50x + 80y subject to ..." into PlanarProblem JSON."""
    return parse_planar_problem(spec).model_dump()


@app.tool()
def diagnose_infeasibility(problem: PlanarProblem) -> dict:
    """List constraints whose removal makes an infeasible problem feasible."""
    return analyze_infeasibility(problem)


@app.tool()
def cross_check_planar_lp(problem: PlanarProblem) -> dict:
    """Solve with SciPy HiGHS; reports unbounded objectives that vertex enumeration misses."""
    return cross_check_with_highs(problem)


if __name__ == "__main__":
    import sys

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")
