"""
This module defines the data structures (pydantic models) passed between the
providers, the engine and the writers.
"""
from pydantic import BaseModel, ConfigDict, Field

class CourseRef(BaseModel):
    """
    A pointer to a single course inside a catalogue, this is what the
    listing pages give us. The pair is the identity, so the model is frozen.
    """
    model_config = ConfigDict(frozen=True)

    catoid: str
    coid: str

class CourseDetail(BaseModel):
    """
    Everything we pulled out of a course detail fragment.
    'fields' is not a fixed schema, the labels come straight from the catalogue text
    (Units, Terms Offered, ...) so we can't know them ahead of time.
    """
    model_config = ConfigDict(frozen=True)

    url: str
    title: str
    fields: dict[str, str] = Field(default_factory=dict)

    def get(self, column: str) -> str:
        if column == "url":
            return self.url
        if column == "title":
            return self.title
        return self.fields.get(column, "")

    def to_record(self) -> dict[str, str]:
        record = {"url": self.url, "title": self.title}
        # url and title are ours, a catalogue label with the same name doesn't get to replace them
        record.update((label, value) for label, value in self.fields.items() if label not in record)
        return record

class ScrapedCourse(BaseModel):
    """
    A CourseRef joined with its details. Only built for courses we actually
    managed to scrape, failed ones never make it this far.
    """
    model_config = ConfigDict(frozen=True)

    catoid: str
    coid: str
    details: CourseDetail

    @classmethod
    def join(cls, ref: CourseRef, details: CourseDetail) -> "ScrapedCourse":
        return cls(catoid=ref.catoid, coid=ref.coid, details=details)

    def to_record(self) -> dict:
        return {"catoid": self.catoid, "coid": self.coid, "details": self.details.to_record()}
