# bn128kit

Pure-Python arithmetic for the alt_bn128 (BN254) curve: prime fields, the
quadratic/sextic/dodecic extension tower, curve groups G1 and G2,
multi-scalar multiplication, a radix-2 FFT, and readers for the headers of
sectioned binary `.zkey` and `.wtns` files. It uses only the standard library.

Field elements are plain Python integers in normal form (`0 <= x < q`);
extension-field elements are nested tuples of them.

## Modules

- `bn128kit.primefield.PrimeField(modulus)`: arithmetic modulo a prime.
  `add`, `sub`, `neg`, `mul`, `square`, `dbl`, `inv`, `div`, `exp`, `pow`,
  the integer-style `idiv`, `mod`, `shl`, `shr`, comparisons (`is_zero`,
  `is_one`, `eq`), conversions (`from_string`, `to_string`, `from_int`,
  `from_bytes`, `to_bytes`) and `to_montgomery` / `from_montgomery`.
  `inv` of zero raises `ZeroDivisionError`.
- `bn128kit.f2field.F2Field(base, non_residue)`: `a + b*u` with
  `u^2 = non_residue`, including `conjugate` and `mul_xi`.
- `bn128kit.f6field.F6Field(base)`, `bn128kit.f12field.F12Field(base)`: the
  sextic and dodecic extensions, with `frobenius`, `frobenius_p2`, `inv`,
  and (on F12) `exp` and `conjugate`. The Frobenius constants are those of
  alt_bn128.
- `bn128kit.curve.Curve(field, a, b, gx, gy)` with `Point` (XYZZ
  coordinates) and `PointAffine`: `add`, `sub`, `dbl`, `neg`, `eq`,
  `is_zero`, `to_affine`, `to_projective`, `to_string`, `mul_by_scalar`
  (non-adjacent form), `multi_mul_by_scalar` and `multi_mul_by_scalar_msm`.
  The attributes `one`, `one_affine`, `zero`, `zero_affine` hold the
  generator and the point at infinity.
- `bn128kit.alt_bn128`: `Engine` (attributes `f1`, `f2`, `f6`, `f12`, `fr`,
  `g1`, `g2`), the shared `get_engine()`, and the moduli `Q` and `R`.
- `bn128kit.fft.FFT(field, max_domain_size)`: `fft`, `ifft`, `root` and the
  static `log2`. Lengths must be powers of two no larger than the prepared
  domain.
- `bn128kit.multiexp.ParallelMultiexp(group)`: `multiexp` and
  `multiexp_sized` (bases laid out in interleaved columns of given sizes).
- `bn128kit.msm.MSM(group)`: `run`, a signed-digit bucket method. A carry
  out of the final window is dropped, so scalars must leave the top bit of
  their last window clear (true of scalars reduced modulo `R`).
- `bn128kit.misc`: `log2`, `divide_work` and `ThreadPool` with
  `parallel_for`, `parallel_block`, `default_pool()` and
  `default_thread_count()`. The pool can be used as a context manager.
- `bn128kit.naf.build_naf(scalar)`: non-adjacent-form digits in
  `{-1, 0, 1}` of a little-endian scalar.
- `bn128kit.splitparstr`: `split_par_str` and `remove_pars` for element
  strings such as `"((1,2),(3,4))"`.
- `bn128kit.binfile`: `BinFile(data, file_type, max_version)`,
  `BinFile.from_file` and `open_existing`.
- `bn128kit.zkey_utils.load_header` → `ZKeyHeader`, and
  `bn128kit.wtns_utils.load_header` → `WtnsHeader`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Prime-field and extension-field arithmetic:

```python
from bn128kit.alt_bn128 import get_engine

engine = get_engine()
fr = engine.fr
print(fr.to_string(fr.mul(fr.from_string("3", 10), 3), 10))  # 9

f2 = engine.f2
product = f2.mul(f2.from_string("(2,2)"), f2.from_string("(3,3)"))
print(f2.to_string(product))  # (0,12)
```

Curve arithmetic on G1:

```python
from bn128kit.alt_bn128 import R, get_engine

g1 = get_engine().g1
three_g = g1.mul_by_scalar(g1.one, 3)
assert g1.eq(three_g, g1.add(g1.dbl(g1.one), g1.one))
assert g1.is_zero(g1.mul_by_scalar(g1.one, R))
print(g1.to_string(three_g))
```

Multi-scalar multiplication takes the scalars packed as little-endian bytes,
`scalar_size` bytes each:

```python
bases = [g1.one_affine, g1.to_affine(g1.dbl(g1.one))]
scalars = b"".join(k.to_bytes(32, "little") for k in (5, 7))
total = g1.multi_mul_by_scalar(bases, scalars, 32)
assert g1.eq(total, g1.mul_by_scalar(g1.one, 5 + 2 * 7))
assert g1.eq(total, g1.multi_mul_by_scalar_msm(bases, scalars, 32))
```

FFT round trip:

```python
from bn128kit.fft import FFT

fft = FFT(fr, 8)
values = [fr.from_int(i + 1) for i in range(8)]
assert fft.ifft(fft.fft(values)) == values
```

Splitting element strings:

```python
from bn128kit.splitparstr import split_par_str

split_par_str("(123,456)")                # ['123', '456']
split_par_str("(((123,456),(789,abc)))")  # ['123,456', '789,abc']
```

Reading a zkey header:

```python
from bn128kit.binfile import open_existing
from bn128kit import zkey_utils

f = open_existing("circuit.zkey", "zkey", 1)
header = zkey_utils.load_header(f)
print(header.n_vars, header.domain_size, header.n_coefs)
```

`BinFile` checks the four-byte type tag and the version and raises
`ValueError` on a mismatch. An unknown section id raises `KeyError`, a
section index out of range raises `IndexError`, and ending a section that was
not read to its exact end raises `ValueError`. `zkey_utils.load_header`
raises `ValueError` for a key whose protocol is not Groth16.

## What it does not do

- It has no command-line program; it is a library only.
- It does not generate or verify proofs, and it has no pairing function
  (no Miller loop or final exponentiation), only the field tower.
- Of `.zkey` and `.wtns` files it reads the headers (and gives raw section
  bytes through `BinFile.get_section_data`); it does not decode witness
  values or key sections beyond the header, and it writes no files.
- `ThreadPool` runs jobs on Python threads, which share the interpreter lock,
  so it does not make the arithmetic run faster on several cores.