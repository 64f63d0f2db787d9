"""Usage walkthrough for the meilimelo client.

Runs against a live instance; set MEILI_HOST and MEILI_API_KEY first.
"""

import anyio

from meilimelo import (
    At,
    Attr,
    FacetBuilder,
    InvalidQueryError,
    Schema,
    config_from_env,
    schema,
)


@schema
class Employee(Schema):
    id: str = ""
    firstname: str = ""
    lastname: str = ""
    company: str = ""
    roles: list[str] = []
    overview: str = ""


async def main() -> None:
    meili = config_from_env().to_client()

    await meili.create_index("employees", "Employees")
    update = await meili.insert(
        "employees",
        [
            Employee(id="lskywalker", firstname="Luke", lastname="Skywalker", company="ACME", roles=["Tech"]),
            Employee(id="lorgana", firstname="Leia", lastname="Organa", company="Big Corp", roles=["Lead"]),
        ],
    )
    print(f"Insertion enqueued as update {update.id}")

    # Groups are ANDed, clauses inside a group are ORed
    facets = (
        FacetBuilder("company", "ACME")
        .or_("company", "Big Corp")
        .and_("roles", "Tech")
        .build()
    )

    base = meili.search("employees").limit(10)
    results = await (
        base.query("skywalker")
        .facets(facets)
        .distribution(["roles"])
        .highlight(["overview"])
        .crop([Attr("overview"), At("lastname", 10)])
        .crop_length(32)
        .run(Employee)
    )

    print(f"Hits: {results.nb_hits} in {results.duration} ms")
    for person in results:
        print(person.firstname, person.lastname)
        if person.formatted:
            print("  ", person.formatted.overview)
    print(results.distribution)

    # The raw filter grammar is checked by the backend only
    try:
        await base.filters("age >").run(Employee)
    except InvalidQueryError as e:
        print(f"Rejected: {e.error.code} ({e.error.link})")


if __name__ == "__main__":
    anyio.run(main)
