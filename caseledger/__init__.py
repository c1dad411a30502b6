"""Settlement, lien and statute deadline calculations for personal-injury cases."""
