import sys

from kadastro.api.endpoints.cadastre import parcelles_url
from kadastro.api.endpoints.dvf import mutations_url
from kadastro.core import upstream

# A commune and a parcel known to exist in both datasets (Bayonne)
TEST_COMMUNE = "64102"
TEST_PARCEL = "64102000AB0001"


def probes():
    return [
        ("Cadastre parcels", parcelles_url(TEST_COMMUNE)),
        ("DVF by parcel", mutations_url(code_parcelle=TEST_PARCEL)),
        ("DVF by commune", mutations_url(code_commune=TEST_COMMUNE)),
    ]


def diagnose():
    """Hit every upstream once. Returns the number of unreachable sources."""
    failures = 0
    for name, url in probes():
        print(f"--- {name}: {url}")
        try:
            resp = upstream.fetch(url, name)
        except upstream.UpstreamUnavailable as e:
            print(f"❌ Connection Failed: {e}")
            failures += 1
            continue

        try:
            if resp.status_code == 200:
                print(f"✅ HTTP 200 ({resp.headers.get('Content-Type', 'unknown type')})")
            else:
                print(f"⚠️  HTTP {resp.status_code}")
        finally:
            resp.close()
    return failures


if __name__ == "__main__":
    sys.exit(1 if diagnose() else 0)
