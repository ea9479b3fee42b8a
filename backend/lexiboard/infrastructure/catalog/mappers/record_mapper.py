"""Mapper for LexicalRecord ORM ↔ Domain conversion."""

from lexiboard.domain.catalog.entities.record import (
    LexicalRecord,
    RecordDraft,
    RecordKind,
    WordType,
)
from lexiboard.domain.common.value_objects.ids import RecordId
from lexiboard.models import LexicalRecord as LexicalRecordORM


class RecordMapper:
    """Mapper for LexicalRecord ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LexicalRecordORM) -> LexicalRecord:
        """Convert ORM model to domain entity."""
        content = RecordDraft(
            kind=RecordKind(orm_model.kind),
            headword=orm_model.headword,
            phonetic=orm_model.phonetic or "",
            meaning=orm_model.meaning or "",
            audio_url=orm_model.audio_url or "",
            band=orm_model.band,
            level=orm_model.level,
            examples=tuple(orm_model.examples or []),
            synonyms=tuple(orm_model.synonyms or []),
            topics=tuple(orm_model.topics or []),
            types=tuple(
                WordType(
                    part_of_speech=item.get("partOfSpeech", ""),
                    meanings=tuple(item.get("meanings", [])),
                )
                for item in orm_model.types or []
            ),
            word_forms=tuple(orm_model.word_forms or []),
            grammar=orm_model.grammar,
            expression_type=orm_model.expression_type,
            category=orm_model.category,
            structure=orm_model.structure or "",
            usage=orm_model.usage,
            notes=orm_model.notes,
        )
        return LexicalRecord.create_with_id(
            id=RecordId(orm_model.id),
            content=content,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: LexicalRecord, orm_model: LexicalRecordORM | None = None
    ) -> LexicalRecordORM:
        """Convert domain entity to ORM model."""
        content = domain_entity.content
        fields = {
            "kind": content.kind.value,
            "headword": content.headword,
            "headword_key": content.headword_key,
            "phonetic": content.phonetic,
            "meaning": content.meaning,
            "audio_url": content.audio_url,
            "band": content.band,
            "level": content.level,
            "examples": list(content.examples),
            "synonyms": list(content.synonyms),
            "topics": list(content.topics),
            "types": [word_type.to_document() for word_type in content.types],
            "word_forms": list(content.word_forms),
            "grammar": content.grammar,
            "expression_type": content.expression_type,
            "category": content.category,
            "structure": content.structure,
            "usage": content.usage,
            "notes": content.notes,
            "updated_at": domain_entity.updated_at,
        }

        if orm_model:
            # Update existing
            for name, value in fields.items():
                setattr(orm_model, name, value)
            return orm_model

        # Create new
        orm_model = LexicalRecordORM(created_at=domain_entity.created_at, **fields)
        if domain_entity.id:
            orm_model.id = domain_entity.id.value
        return orm_model
