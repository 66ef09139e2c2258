"""Local portrait paths. Guess results always point at the bundled image."""

from __future__ import annotations

from onepiecedle.models import Entity, GuessResult

LOCAL_IMAGE_PREFIX = "/characters/"
LOCAL_IMAGE_SUFFIX = ".png"


def local_image_ref(entity_id: str) -> str:
    return f"{LOCAL_IMAGE_PREFIX}{entity_id}{LOCAL_IMAGE_SUFFIX}"


def normalize_image_ref(image_ref: str, entity_id: str) -> str:
    """Keep refs already under the local prefix, replace anything else."""
    if image_ref.startswith(LOCAL_IMAGE_PREFIX):
        return image_ref
    return local_image_ref(entity_id)


def normalize_entity_image(entity: Entity) -> Entity:
    image_ref = normalize_image_ref(entity.image_ref, entity.id)
    if image_ref == entity.image_ref:
        return entity
    return entity.model_copy(update={"image_ref": image_ref})


def normalize_guess_image(guess: GuessResult) -> GuessResult:
    """Point a stored guess at the current local image path."""
    image_ref = local_image_ref(guess.entity_id)
    if image_ref == guess.image_ref:
        return guess
    return guess.model_copy(update={"image_ref": image_ref})
