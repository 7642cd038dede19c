"""Square matrices with entries reduced modulo a fixed modulus."""

from cpkit.modular import MOD


class Matrix:
    """A square matrix whose products are reduced modulo ``modulus``."""

    def __init__(self, size, modulus=MOD):
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self.modulus = modulus
        self.rows = [[0] * size for _ in range(size)]

    @classmethod
    def identity(cls, size, modulus=MOD):
        """Return the identity matrix of the given size."""
        result = cls(size, modulus)
        for i, row in enumerate(result.rows):
            row[i] = 1
        return result

    def _product(self, other):
        if self.size != other.size:
            raise ValueError("matrix sizes differ")
        columns = list(zip(*other.rows))
        return [
            [sum(a * b for a, b in zip(row, col)) % self.modulus for col in columns]
            for row in self.rows
        ]

    def __mul__(self, other):
        result = Matrix(self.size, self.modulus)
        result.rows = self._product(other)
        return result

    def __imul__(self, other):
        self.rows = self._product(other)
        return self

    def __pow__(self, exponent):
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(self.size, self.modulus)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            exponent >>= 1
            if exponent:
                base = base * base
        return result

    def __str__(self):
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.rows
        )


def matrix_power(matrix, exponent):
    """Return ``matrix`` raised to ``exponent`` without changing ``matrix``."""
    return matrix**exponent