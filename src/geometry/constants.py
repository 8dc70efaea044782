# Two coefficients closer than this are treated as equal (strictly less than).
EPSILON = 1e-14

# SVG / canvas order: (a, b, c, d, e, f)
IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
