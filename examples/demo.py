"""
Demonstration of the Nesting Index Package

Walks through the building blocks of the nesting index computation:
1. Validating and relabelling double occurrence words
2. Detecting maximal return and repeat words
3. One reduction step and the full breadth-first search
4. Isomorphism classes and the circular nesting index
"""

from nesting_index import (
    EngineConfig,
    classify_isomorphisms,
    evaluate_words,
    find_maximal_subwords,
    format_tally,
    format_word,
    is_dow,
    nesting_index,
    reduction_path,
    relabel,
    step,
    tally,
)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_words():
    print_section("1. Double Occurrence Words")

    for letters in ([1, 2, 2, 1], [5, 9, 5, 7, 9, 7], [1, 2, 3, 3, 2, 1, 1, 2, 3]):
        print(f"\n{format_word(letters)}")
        print(f"  DOW: {is_dow(letters)}")
        if is_dow(letters):
            print(f"  Canonical form: {relabel(letters)}")


def demonstrate_subwords():
    print_section("2. Maximal Subwords")

    for letters in ([1, 2, 3, 3, 2, 1], [1, 2, 3, 1, 2, 3], [1, 2, 3, 3, 2, 4, 4, 1],
                    [1, 2, 1, 3, 2, 3]):
        found = find_maximal_subwords(letters)
        print(f"\n{format_word(letters)}")
        if found is None:
            print("  (none)")
            continue
        for s in found:
            print(f"  {s.kind.value:7s} at {s.start}: {format_word(s.letters)}")


def demonstrate_reduction():
    print_section("3. Reduction")

    word = [1, 2, 2, 3, 1, 3]
    print(f"\nOne step of {format_word(word)}:")
    for branch in step(word):
        print(f"  {branch.operation.describe():18s} -> {branch.word}")

    word = [1, 2, 1, 3, 2, 4, 3, 4]
    print(f"\nSearch for {format_word(word)}:")
    result = reduction_path(word, EngineConfig(verbose=True))
    print(f"  Nesting index: {result.index}")
    print(f"  {result.describe()}")


def demonstrate_isomorphisms():
    print_section("4. Isomorphism Classes")

    word = [1, 2, 1, 3, 2, 3]
    members = classify_isomorphisms(word)
    print(f"\nClass of {format_word(word)} ({len(members)} members):")
    for member in members:
        print(f"  {member.word}: {member.nesting_index}")
    print(f"  Circular nesting index: {min(m.nesting_index for m in members)}")


def demonstrate_batch():
    print_section("5. Batch Evaluation")

    texts = ["1221", "1212", "121323", "12332441", "123321123", "12a"]
    results = evaluate_words(texts)
    for r in results:
        print(f"  {r.format()}")
    print()
    print(format_tally(tally(results)))


def main():
    demonstrate_words()
    demonstrate_subwords()
    demonstrate_reduction()
    demonstrate_isomorphisms()
    demonstrate_batch()

    print("\n" + "=" * 70)
    print(f"  Done (nesting index of 1221 = {nesting_index([1, 2, 2, 1])})")
    print("=" * 70)


if __name__ == "__main__":
    main()
