from strcalc import Evaluator, Parser, Printer

# Define a program manually
program = r"""
(1 . 2) ^ 2 . 3 ^ 2 ^ 1
"""

# Perform scanning and parsing on the input program
parser = Parser(program)
tree = parser.parse()

# Print out the tree
print("=" * 25)
print("Tree:")
print("=" * 25)
print(Printer().print(tree))

# Evaluate the tree into a single string
evaluator = Evaluator(program)
result = evaluator.evaluate(tree)

# Print out the final output
print("=" * 25)
print("Result:")
print("=" * 25)
print(result)
