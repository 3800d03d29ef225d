"""Host integrations for the scanning engine."""
