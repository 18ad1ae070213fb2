from crypto.errors import CodecError

class ProofError(Exception):
    """Base class for proof verification failures that carry a reason."""

class InputError(ProofError):
    """The bundle itself is missing or not parseable JSON."""

class StructuralError(ProofError):
    """A decoded structure does not have the expected shape."""

class AddressError(ProofError):
    """The address uses an unsupported or unrecognised encoding."""

__all__ = ["CodecError", "ProofError", "InputError", "StructuralError", "AddressError"]
