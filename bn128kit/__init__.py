"""Prime and extension fields, alt_bn128 curve groups, multi-scalar multiplication, FFT and zkey/wtns header readers."""

__version__ = "0.1.0"