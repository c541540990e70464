"""Application service: blueprint patch enrichment.

Fetches product and token blueprint patches and fills in the brand's
display name.  Everything here is best-effort: a missing repository, an
unreadable store or an unknown brand leaves the patch (or its brand
name) empty instead of failing the surrounding read.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from stockview.domain.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    RepositoryError,
    ValidationError,
)
from stockview.domain.model.blueprint import ProductBlueprintPatch, TokenBlueprintPatch
from stockview.domain.repository.blueprint_repository import (
    ProductBlueprintRepository,
    TokenBlueprintRepository,
)
from stockview.domain.service.name_resolver import NameResolver

logger = structlog.get_logger(__name__)


class BlueprintPatchEnricher:

    def __init__(
        self,
        product_blueprint_repo: ProductBlueprintRepository | None = None,
        token_blueprint_repo: TokenBlueprintRepository | None = None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        self._product_blueprint_repo = product_blueprint_repo
        self._token_blueprint_repo = token_blueprint_repo
        self._name_resolver = name_resolver

    def product_patch(self, product_line_id: str) -> ProductBlueprintPatch | None:
        if self._product_blueprint_repo is None:
            logger.warning("product_blueprint_repo_missing", product_line_id=product_line_id)
            return None
        try:
            patch = self._product_blueprint_repo.get_patch(product_line_id)
        except RepositoryError as exc:
            logger.warning(
                "product_blueprint_unavailable",
                product_line_id=product_line_id,
                error=str(exc),
            )
            return None
        if patch is None:
            return None

        brand_name = self.brand_name(patch.brand_id, fallback=patch.brand_name)
        logger.debug(
            "product_blueprint_brand_resolved",
            product_line_id=product_line_id,
            brand_id=patch.brand_id,
            brand_name=brand_name,
        )
        return replace(patch, brand_name=brand_name)

    def token_patch(self, token_line_id: str) -> TokenBlueprintPatch | None:
        if self._token_blueprint_repo is None:
            logger.warning("token_blueprint_repo_missing", token_line_id=token_line_id)
            return None
        try:
            patch = self._token_blueprint_repo.get_patch(token_line_id)
        except RepositoryError as exc:
            logger.warning(
                "token_blueprint_unavailable",
                token_line_id=token_line_id,
                error=str(exc),
            )
            return None
        if patch is None:
            return None

        brand_name = self.brand_name(patch.brand_id, fallback=patch.brand_name)
        logger.debug(
            "token_blueprint_brand_resolved",
            token_line_id=token_line_id,
            brand_id=patch.brand_id,
            brand_name=brand_name,
        )
        return replace(patch, brand_name=brand_name)

    def brand_name(self, brand_id: str, fallback: str = "") -> str:
        """Resolve a brand's display name, keeping ``fallback`` on a miss."""
        brand_id = brand_id.strip()
        resolved = ""
        if brand_id and self._name_resolver is not None:
            resolved = self._name_resolver.resolve_brand_name(brand_id).strip()
        return resolved or fallback.strip()


class ShowTokenBlueprintHandler:
    """Query: a token blueprint patch with its brand name filled in."""

    def __init__(
        self,
        token_blueprint_repo: TokenBlueprintRepository | None,
        name_resolver: NameResolver | None = None,
    ) -> None:
        self._token_blueprint_repo = token_blueprint_repo
        self._enricher = BlueprintPatchEnricher(
            token_blueprint_repo=token_blueprint_repo,
            name_resolver=name_resolver,
        )

    def handle(self, token_line_id: str) -> TokenBlueprintPatch:
        if self._token_blueprint_repo is None:
            raise ConfigurationError("token blueprint repository is not configured")
        token_line_id = token_line_id.strip()
        if not token_line_id:
            raise ValidationError("token line id is required")
        patch = self._enricher.token_patch(token_line_id)
        if patch is None:
            raise EntityNotFoundError(f"Token blueprint '{token_line_id}' not found")
        return patch
