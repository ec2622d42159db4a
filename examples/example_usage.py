import numpy as np

from symbolic_expression import (
  Expression, EngineConfig, COMPLEX, Constant, var, sin, cos, exp,
  LogLevel, configure_logging
)


def real_example():
  """Differentiate, simplify and evaluate a real-valued expression"""
  x = var("x")
  expr = Expression(sin(x) * x + x ** 3)
  print(f"f(x)       = {expr}")

  derivative = expr.diff("x")
  print(f"f'(x) raw  = {derivative}")
  simplified = derivative.simplify()
  print(f"f'(x)      = {simplified}")
  print(f"LaTeX      = {simplified.to_latex()}")

  for value in (0.0, 0.5, 1.0):
    print(f"f'({value}) = {simplified.evaluate({'x': value}):.6f}")

  xs = np.linspace(-1, 1, 5)
  print(f"f' on grid = {simplified.evaluate_batch({'x': xs})}")


def complex_example():
  """Evaluate in the complex field (no powers are differentiated here)"""
  z = var("z")
  config = EngineConfig(field=COMPLEX, simplify_derivatives=True)
  expr = Expression(exp(z) * Constant(3 - 4j) + cos(z), config)
  print(f"g(z)       = {expr}")
  print(f"g'(z)      = {expr.diff('z')}")
  print(f"g(i)       = {expr.evaluate({'z': 1j})}")


if __name__ == "__main__":
  configure_logging(LogLevel.DETAILED)
  real_example()
  print()
  complex_example()
