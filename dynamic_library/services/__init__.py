"""
Services applicatifs : conversion et selection des sous-titres, maintenance.
"""
