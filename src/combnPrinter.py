import sys

NUM_DIGITS = 10


class CombinationPrinter:
    def __init__(self, verbosity, stream=None):
        self.verbosity = verbosity
        self.stream = stream

    def factorial(self, k):
        assert k >= 0
        if k <= 1:
            return 1
        else:
            return k * self.factorial(k - 1)

    def binomial(self, n, k):
        return self.factorial(n) // (self.factorial(k) * self.factorial(n - k))

    def printCombinations(self, n):
        assert 1 <= n < NUM_DIGITS
        if self.verbosity >= 1:
            print("<CombinationPrinter::printCombinations>:", file=sys.stderr)
            print(" n=%i" % n, file=sys.stderr)

        stream = self.stream if self.stream is not None else sys.stdout
        digits = [0] * n
        num_written = self._descend(stream, digits, 0, 0)

        if self.verbosity >= 1:
            print(" wrote %i lines" % num_written, file=sys.stderr)
        if self.verbosity >= 3:
            print(
                "#combinations = %i (expected = %i)" % (num_written, self.binomial(NUM_DIGITS, n)),
                file=sys.stderr,
            )
        return num_written

    def _descend(self, stream, digits, depth, candidate):
        n = len(digits)
        if depth == n:
            stream.write("".join("%i" % digits[idx] for idx in range(n)) + "\n")
            return 1
        num_written = 0
        # digits after position depth must still fit below NUM_DIGITS
        while candidate <= NUM_DIGITS - (n - depth):
            digits[depth] = candidate
            num_written += self._descend(stream, digits, depth + 1, candidate + 1)
            candidate += 1
        return num_written


def print_combinations(n, stream=None, verbosity=0):
    """Write every strictly increasing n-digit combination of 0-9, one per line."""
    CombinationPrinter(verbosity, stream).printCombinations(n)
