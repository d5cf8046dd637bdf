import os
import sys
import logging

from tinydatalog.engine.data_set import DataSet
from tinydatalog.model import Atom, Variable, Constant, atom, fact, rule, program, query

# Set up logger
logger = logging.getLogger("tinydatalog")
log_level = os.environ.get("DLG_DEBUG", "WARNING").upper()
logger.setLevel(log_level)
if not logger.hasHandlers():
    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(ch)


def main():
    print('ENTERED MAIN (syntax tree API)')
    data = DataSet()

    # 1) Facts (EDB)
    X = Variable("X")
    Y = Variable("Y")
    Z = Variable("Z")

    data.ingest(program(
        fact("edge", "a", "b"),
        fact("edge", "b", "c"),
        fact("edge", "c", "d"),
        rule(atom("path", X, Y), atom("edge", X, Y)),
        rule(atom("path", X, Z), atom("edge", X, Y), atom("path", Y, Z)),
    ))
    print(f"Loaded {len(data)} facts and {len(data.rules)} rules")

    # 2) Saturate
    passes = data.run()
    print(f"Fixpoint after {passes} passes, {len(data)} facts:")
    print(data.render())

    # 3) Queries
    for q in [
        query(atom("path", Constant("a"), X)),
        query(atom("path", X, Y), atom("edge", Y, Constant("d"))),
        query(Atom("path", (Constant("d"), X))),
    ]:
        answers = data.query(q)
        print(f"--- {q!r} ---")
        if not answers:
            print("    <no answers>")
        for a in answers:
            print(f"    {a}")

    # 4) The same relation as a DataFrame
    print(data.get_relation("path"))

    # 5) Text front end
    sample = os.path.join(os.path.dirname(__file__), "..", "test_data", "star_wars.datalog")
    family = DataSet()
    family.load_program_from_file(sample)
    family.run()
    for a in family.query_from_string("?- grandparent(X, ben)."):
        print(a)


if __name__ == "__main__":
    sys.exit(main())
