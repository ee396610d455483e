"""
Examples of folds, inner products and permutations

Demonstrates the same code running over numbers, strings, booleans and
path costs
"""
from numerics import (
    configure_logging,
    monoid_fold,
    inner_product,
    semiring_inner_product,
    permute,
    IntMonoid,
    MultiplyMonoid,
    StringMonoid,
    MaxMonoid,
    FunctionMonoid,
    Aggregator,
    ArithmeticSemiring,
    BooleanSemiring,
    TropicalSemiring,
    IndexOutOfRangeError,
)


def example_1_folds():
    """
    Example 1: One fold, many monoids

    Use case: sum, maximum and concatenation through the same function
    """
    print("=" * 60)
    print("Example 1: Monoid Folds")
    print("=" * 60)

    values = [3, 1, 4, 1, 5, 9, 2, 6]
    print(f"  Values: {values}")
    print(f"  Sum:     {monoid_fold(values, IntMonoid())}")
    print(f"  Product: {monoid_fold(values, MultiplyMonoid())}")
    print(f"  Max:     {monoid_fold(values, MaxMonoid())}")
    print(f"  Joined:  {monoid_fold(map(str, values), StringMonoid())!r}")
    print(f"  Empty:   {monoid_fold([], IntMonoid())} (identity)")

    # Values arriving in batches
    agg = Aggregator(IntMonoid()).extend(values[:4])
    agg.extend(values[4:])
    print(f"  Running total via Aggregator: {agg.value} over {agg.count} values")
    print()


def example_2_dot_products():
    """
    Example 2: Inner products with explicit monoids

    Use case: dot product, and what happens with unequal lengths
    """
    print("=" * 60)
    print("Example 2: Inner Products")
    print("=" * 60)

    add, mul = IntMonoid(), MultiplyMonoid()
    print(f"  [1,2,3] . [4,5,6] = {inner_product([1, 2, 3], [4, 5, 6], add, mul)}")
    print(f"  [1,2]   . [4,5,6] = {inner_product([1, 2], [4, 5, 6], add, mul)} (6 ignored)")

    # Component-wise vector sum of scaled vectors
    vec_add = FunctionMonoid((0, 0), lambda a, b: (a[0] + b[0], a[1] + b[1]))
    scale = FunctionMonoid(1, lambda k, v: (k * v[0], k * v[1]))
    combo = inner_product([2, 3], [(1, 0), (0, 1)], vec_add, scale)
    print(f"  2*(1,0) + 3*(0,1) = {combo}")
    print()


def example_3_semirings():
    """
    Example 3: The same inner product over different semirings

    Use case: counting, reachability and shortest two-hop routes
    """
    print("=" * 60)
    print("Example 3: Semiring Inner Products")
    print("=" * 60)

    # Edge weights a->x_i and x_i->b for three intermediate nodes
    to_via = [1, 4, 2]
    from_via = [9, 1, 5]
    print(f"  Arithmetic: {semiring_inner_product(to_via, from_via, ArithmeticSemiring())}")
    print(f"  Shortest a->b through one hop: {semiring_inner_product(to_via, from_via, TropicalSemiring())}")

    edges_out = [True, False, True]
    edges_in = [False, False, True]
    print(f"  b reachable from a in two hops: {semiring_inner_product(edges_out, edges_in, BooleanSemiring())}")
    print()


def example_4_permute():
    """
    Example 4: Applying a cycle of swaps

    Use case: rotate selected positions, and see where a bad index stops
    """
    print("=" * 60)
    print("Example 4: Permute")
    print("=" * 60)

    source = ["a", "b", "c", "d"]
    for n in range(2, 5):
        cycle = list(range(n))
        print(f"  permute({source}, {cycle}) = {permute(source, cycle)}")
    print(f"  Source untouched: {source}")

    try:
        permute(["a", "b"], [0, 1, 9])
    except IndexOutOfRangeError as e:
        print(f"  {e}; buffer at failure: {e.partial}")
    print()


if __name__ == "__main__":
    configure_logging()

    example_1_folds()
    example_2_dot_products()
    example_3_semirings()
    example_4_permute()

    print("=" * 60)
    print("All examples completed!")
    print("=" * 60)
