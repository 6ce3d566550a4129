#!/usr/bin/env python3

import argparse, logging, sys
from pericope.pericope import Pericope
from pericope.errors import PericopeError
from pericope.utils import readsrc

def apply(args, res):
    """ Applies the requested operations to res in a fixed order """
    if args.union:
        for r in args.union:
            res = res.union(Pericope(r))
    if args.intersect:
        for r in args.intersect:
            res = res.intersection(Pericope(r))
    if args.subtract:
        for r in args.subtract:
            res = res.subtract(Pericope(r))
    if args.complement is not None:
        res = res.complement(Pericope(args.complement) if args.complement else None)
    if args.normalize:
        res = res.normalize()
    if args.expand:
        res = res.expand(*args.expand)
    if args.contract:
        res = res.contract(*args.contract)
    return res

def stats(res):
    yield f"verses: {res.verse_count()}"
    yield f"chapters: {res.chapter_count()}"
    yield f"density: {res.density():.3f}"
    yield "gaps: " + ", ".join(str(v) for v in res.gaps())

def main(argv=None):
    parser = argparse.ArgumentParser(description="Parse and combine scripture references")
    parser.add_argument("reference", nargs="*", help="Reference, e.g. GEN 1:1-3,5")
    parser.add_argument("-u", "--union", action="append", help="Add a reference")
    parser.add_argument("-i", "--intersect", action="append", help="Keep only verses also in a reference")
    parser.add_argument("-s", "--subtract", action="append", help="Remove the verses of a reference")
    parser.add_argument("-c", "--complement", nargs="?", const="", help="Verses not included, within an optional scope")
    parser.add_argument("-n", "--normalize", action="store_true", help="Sort and merge the ranges")
    parser.add_argument("-e", "--expand", nargs=2, type=int, metavar=("BEFORE", "AFTER"), help="Add verses around the reference")
    parser.add_argument("-C", "--contract", nargs=2, type=int, metavar=("START", "END"), help="Drop verses from each end")
    parser.add_argument("-f", "--format", default="canonical", choices=("canonical", "full_name", "abbreviated"))
    parser.add_argument("--verses", action="store_true", help="List each verse on its own line")
    parser.add_argument("--stats", action="store_true", help="Report counts, density and gaps")
    parser.add_argument("--scan", help="List the references found in a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.scan:
            for p in Pericope.parse(readsrc(args.scan)):
                print(p.to_string(args.format))
        if args.reference:
            res = apply(args, Pericope(" ".join(args.reference)))
            if args.verses:
                for v in res.to_a():
                    print(v)
            else:
                print(res.to_string(args.format))
            if args.stats:
                for s in stats(res):
                    print(s)
        elif not args.scan:
            parser.print_usage()
            return 1
    except (PericopeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
