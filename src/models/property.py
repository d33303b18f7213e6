from dataclasses import dataclass


@dataclass(frozen=True)
class Property:
    address: str
    bedrooms: int
    bathrooms: float  # Half baths allowed (e.g. 2.5)
    year_built: int

    def age(self, reference_year: int) -> int:
        return reference_year - self.year_built
