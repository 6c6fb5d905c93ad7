"""Use case to compute the allocation of holdings by asset type."""

from collections.abc import Sequence

from src.domain.models import AllocationSlice, Asset, AssetAllocation
from src.domain.services import (
    CurrencyConverter,
    allocation_shares,
    group_assets,
    validate_asset_values,
)
from src.infrastructure.logging.logger import get_app_logger


class GetAssetAllocationUseCase:
    """Compute converted holdings and shares per asset type."""

    def __init__(
        self,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            converter: Session converter targeting the display currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._converter = converter
        self._logger = logger or get_app_logger()

    def execute(
        self,
        assets: Sequence[Asset],
        account_id: str | None = None,
    ) -> AssetAllocation:
        """Return the allocation by asset type.

        Args:
            assets: Current holdings.
            account_id: Optional account to restrict the allocation to.

        Returns:
            AssetAllocation: Slices in first-seen asset type order.
        """
        selected = [
            asset
            for asset in assets
            if account_id is None or asset.account_id == account_id
        ]
        validate_asset_values(selected, self._logger)
        totals = group_assets(
            selected,
            lambda asset: asset.type,
            self._converter,
        )
        shares = allocation_shares(totals)
        slices = [
            AllocationSlice(
                asset_type=asset_type,
                amount=amount,
                share_percent=shares[asset_type],
            )
            for asset_type, amount in totals.items()
        ]
        total = sum(totals.values(), 0.0)
        self._logger.info(
            f"Asset allocation computed: {len(slices)} types, total={total}"
        )
        return AssetAllocation(
            currency_code=self._converter.display_currency,
            total=total,
            slices=slices,
        )


__all__ = ["GetAssetAllocationUseCase", "AssetAllocation", "AllocationSlice"]
