"""Supabase repository for profile weights."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from weight_trends.adapters.parsing import parse_optional_weight
from weight_trends.domain.weights import ProfileWeights
from weight_trends.services.weight_trends import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the user's physical profile weights."""

    client: Client

    def get_profile_weights(self, user_id: UUID) -> ProfileWeights:
        """Return current and target weights, empty if no profile exists."""
        response = (
            self.client.table("user_physical_profiles")
            .select("weight_kg, target_weight_kg")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return ProfileWeights()
        row = response.data[0]
        return ProfileWeights(
            current_weight_kg=parse_optional_weight(row.get("weight_kg")),
            target_weight_kg=parse_optional_weight(row.get("target_weight_kg")),
        )
