"""qhilbert: Space Inspection Command
---------------------------------------------------------
Implements ``qhilbert space``, which prints the structure of a composite
Hilbert space and the mapping between flat basis indices and multi-indices.
"""

import typer

from qhilbert.core.errors import QHError, get_logger
from qhilbert.space import HilbertSpace


def space_command(
    dimensions: list[int] = typer.Argument(
        ..., help="Factor dimensions, most significant first"
    ),
    limit: int = typer.Option(
        64, "--limit", "-n", min=0, help="Maximum number of table rows to print"
    ),
):
    """Print rank, dimensions and the index table of a tensor-product space.

    Examples
    --------
        qhilbert space 2 3
        qhilbert space 2 2 2 --limit 4

    """
    log = get_logger()
    try:
        space = HilbertSpace(dimensions)
    except QHError as e:
        log.error(str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"rank: {space.rank}")
    typer.echo(f"dimensions: {list(space.dimensions)}")
    typer.echo(f"total dimension: {space.total_dimension}")

    width = len(str(space.total_dimension - 1))
    shown = min(limit, space.total_dimension)
    typer.echo("")
    for index in range(shown):
        vector = ", ".join(str(k) for k in space.get_vector(index))
        typer.echo(f"  {index:>{width}} -> ({vector})")
    if shown < space.total_dimension:
        typer.echo(f"  ... {space.total_dimension - shown} more")
