# Core type aliases for the Peano interpreter.
# Naturals are the only runtime values; everything else in the pipeline is
# syntax (surface AST from the reader, intermediate Exp trees for the evaluator).
#
# Naming guidance:
# - Offset: a character index into program text, threaded through the scanner
#   and parser by the caller (the scanner keeps no position state of its own).
# - Identifier: a variable, parameter or function name as written in source.
#
# The public pipeline lives in the submodules:
#   peano.reader.parser.parse -> peano.compiler.lowering.lower
#   -> peano.evaluation.evaluator.evaluate

Offset = int
Identifier = str
