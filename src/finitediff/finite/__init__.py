"""Central finite-difference stencils and their evaluation."""
