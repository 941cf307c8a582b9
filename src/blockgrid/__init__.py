"""Static LED layouts for grids of perimeter-lit square blocks."""
