"""Season overview: drivers, calendar, a race result and the standings."""

import asyncio

from paddock import ArticleClient, AsyncFeedClient, ImageProber, SeasonPipeline
from paddock.formatters import format_lap_time, format_points_difference

SEASON = 2024


async def main() -> None:
    async with (
        AsyncFeedClient() as feed,
        ArticleClient(cache={}) as articles,
        ImageProber() as prober,
    ):
        pipeline = SeasonPipeline(feed, articles, prober.probe_image)

        print(f"=== {SEASON} Drivers ===")
        drivers = await pipeline.enriched_drivers(SEASON)
        for d in drivers:
            career = d.enrichment.career if d.enrichment else None
            wins = career.wins if career else 0
            print(f"  #{d.permanent_number or '--'} {d.full_name} ({d.country_code}) - {wins} wins")

        print(f"\n=== {SEASON} Calendar ===")
        races = await pipeline.race_schedule(SEASON)
        for race in races[:5]:
            print(f"  R{race.round} {race.race_name} - {race.location.locality}, {race.location.country}")
            print(f"      {race.circuit_image}")

        if not races:
            return

        first = races[0]
        print(f"\n=== {first.race_name} Result ===")
        results = await pipeline.race_results(SEASON, first.round, resolve_image=False)
        for r in results.results[:10]:
            print(
                f"  {r.position_text:>3} {r.driver_name:<25} {r.team:<15} "
                f"{format_lap_time(r.race_time_millis):>12}  {r.status_category.value}"
            )

        print(f"\n=== Constructors after round {races[-1].round} ===")
        standings = await pipeline.constructor_standings(SEASON, races[-1].round)
        leader = standings[0].points if standings else 0
        for s in standings:
            gap = format_points_difference(leader, s.points)
            print(f"  {s.position:>2}. {s.team_name:<15} {s.points:>6g} pts ({gap})")


if __name__ == "__main__":
    asyncio.run(main())
