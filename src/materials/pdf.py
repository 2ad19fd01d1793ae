# materials/pdf.py
#
# Direction sampling strategies used for importance sampling. value() is the
# solid-angle density of the directions generate() produces.
import math
from core.vector import Vector3
from core.onb import ONB
from core.utils import random_cosine_direction, random_double

class PlaceholderInvokedError(RuntimeError):
    """
    Raised when a NoMaterial or NoPDF placeholder is used. This always means
    the scene was wired incorrectly.
    """

class PDF:
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")

class CosinePDF(PDF):
    """Cosine-weighted hemisphere around w."""
    def __init__(self, w: Vector3):
        self.uvw = ONB.build_from_w(w)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        if cosine <= 0.0:
            return 0.0
        return cosine / math.pi

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))

class HittablePDF(PDF):
    """Samples directions from origin towards a hittable, typically a light."""
    def __init__(self, obj, origin: Vector3):
        self.obj = obj
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.obj.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.obj.random(self.origin, rng)

class MixturePDF(PDF):
    """Equal-weight mixture of two strategies."""
    def __init__(self, p0: PDF, p1: PDF):
        self.p = (p0, p1)

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self, rng) -> Vector3:
        if random_double(rng) < 0.5:
            return self.p[0].generate(rng)
        return self.p[1].generate(rng)

class NoPDF(PDF):
    def value(self, direction):
        raise PlaceholderInvokedError("NoPDF.value() should never be called.")

    def generate(self, rng):
        raise PlaceholderInvokedError("NoPDF.generate() should never be called.")
