"""Order-sensitive signature over a label of suffix spans."""

SIGNATURE_START: int = 5775863
SIGNATURE_INCREMENT: int = 38873647
_MASK32: int = 0xFFFFFFFF


def update_signature(sig: int, buf: bytes, start: int, end: int) -> int:
    """Fold the span buf[start:end] into a running 32-bit signature.

    The empty span adds a fixed increment so that labels differing only
    by the presence of the empty suffix get different signatures.
    """
    if start == end:
        return (sig + SIGNATURE_INCREMENT) & _MASK32
    sig += (buf[start] + 1) * SIGNATURE_INCREMENT
    for i in range(start, end):
        sig += buf[i]
    return sig & _MASK32


def label_signature(buf: bytes, label) -> int:
    """Signature of a whole label, equal to folding its words in order."""
    sig = SIGNATURE_START
    for w in label:
        sig = update_signature(sig, buf, w.start, w.end)
    return sig
