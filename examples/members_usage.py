"""
Organization membership example.

This example demonstrates the membership features of OrgHub:
- Listing all and public members
- Checking membership
- Publicizing and concealing your own membership

Run with:
    ORGHUB_TOKEN=ghp_xxx python examples/members_usage.py acme-corp your-login
"""

import asyncio
import sys

from orghub import NotFoundError, OrgHub


async def main(org: str, login: str) -> None:
    # Create OrgHub client (loads config from .env / ORGHUB_* variables)
    async with await OrgHub.create() as hub:
        # =================================================================
        # 1. List members
        # =================================================================
        print(f"Members of {org}:")
        await hub.members.each(org, lambda m: print(f"  {m['login']}"))

        public = await hub.members.list(org, {"public": True})
        print(f"\n{len(public)} public member(s)")

        # =================================================================
        # 2. Check membership
        # =================================================================
        if not await hub.members.member(org, login):
            print(f"\n{login} is not a member of {org}")
            return

        is_public = await hub.members.member(org, login, {"public": True})
        print(f"\n{login} is a {'public' if is_public else 'concealed'} member")

        # =================================================================
        # 3. Toggle visibility of your own membership
        # =================================================================
        try:
            if is_public:
                await hub.members.conceal(org, login)
                print("  Membership concealed")
            else:
                await hub.members.publicize(org, login)
                print("  Membership publicized")
        except NotFoundError:
            print("  Only the authenticated user can change their own visibility")

        # Stream members lazily
        async for member in hub.members.iter_members(org, {"per_page": 100}):
            if member["login"] == login:
                print(f"\nFound {login} (id {member['id']})")
                break


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1], sys.argv[2]))
