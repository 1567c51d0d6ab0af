"""Dictionary-backed resource lookup with the storefront's English strings."""

from storefront.localization.port import ResourceLookup

DEFAULT_RESOURCES = {
    "en": {
        "ActivityLog.PublicStore.ViewCategory": "Public store. Viewed a category details page ('{0}')",
        "ActivityLog.PublicStore.ViewBrand": "Public store. Viewed a brand details page ('{0}')",
        "ActivityLog.PublicStore.ViewCollection": "Public store. Viewed a collection details page ('{0}')",
        "ActivityLog.PublicStore.AddVendorReview": "Public store. Added a vendor review ('{0}')",
        "VendorReviews.SuccessfullyAdded": "Your review has been successfully added.",
        "VendorReviews.SeeAfterApproving": "You will see the review after approving by a store administrator.",
        "VendorReviews.NotAllowed": "This vendor does not accept reviews.",
        "VendorReviews.Helpfulness.OnlyRegistered": "Only registered customers can set review helpfulness",
        "VendorReviews.Helpfulness.YourOwnReview": "You cannot vote for your own review",
        "VendorReviews.Helpfulness.SuccessfullyVoted": "Successfully voted",
    }
}


class DictResourceLookup(ResourceLookup):
    def __init__(self, resources: dict[str, dict[str, str]] | None = None, fallback_language: str = "en") -> None:
        self.resources = resources if resources is not None else DEFAULT_RESOURCES
        self.fallback_language = fallback_language

    def resolve(self, key, language="en") -> str:
        for lang in (language, self.fallback_language):
            text = self.resources.get(lang, {}).get(key)
            if text is not None:
                return text
        return key
