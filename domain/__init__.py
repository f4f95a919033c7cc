"""Describes the RecipeAI domain. Centres around two proxies.

- Recommendations come from a remote service we do not control.
- So does authentication.
- Both answer in loosely typed shapes, so everything is unwrapped on the way in.
- When either is down the user should still get something, so both fall back.

No state is kept between requests.
"""
