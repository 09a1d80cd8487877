import os

from hypothesis import settings

# More examples on CI, e.g. HYPOTHESIS_PROFILE=ci pytest
settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile("dev", max_examples=50)

if os.getenv("HYPOTHESIS_PROFILE"):
    settings.load_profile(os.environ["HYPOTHESIS_PROFILE"])
