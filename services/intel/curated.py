"""
Hand-curated, high-signal events (snapshot of Feb 24, 2026).

They lead every response regardless of provider output and their URLs win
over any provider record pointing at the same story.
"""
from __future__ import annotations

import copy
from typing import List, Tuple

from services.intel.records import ORIGIN_CURATED, EventRecord
from services.intel.taxonomy import Sector, broad_category

CURATED_TIMELINE = "LIVE - Feb 2026"


def _curated(
    sector: Sector,
    subject: str,
    key_players: str,
    impact: str,
    source_label: str,
    url: str,
    latitude: str,
    longitude: str,
) -> EventRecord:
    return {
        "sector": sector.value,
        "subject": subject,
        "keyPlayers": key_players,
        "timeline": CURATED_TIMELINE,
        "impact": impact,
        "sourceLabel": source_label,
        "url": url,
        "latitude": latitude,
        "longitude": longitude,
        "category": broad_category(sector),
        "isCurated": True,
        "origin": ORIGIN_CURATED,
    }


CURATED_RECORDS: Tuple[EventRecord, ...] = (
    _curated(
        Sector.CONFLICT,
        "US-Iran Military Standoff: Armada Deployed, Talks Continue Under Threat",
        "United States, Iran, US Navy",
        "US carrier groups positioned near Iran as Trump threatens military action; indirect talks ongoing "
        "but Iran views any confrontation as existential. Escalation risk HIGH",
        "Modern Diplomacy / GIS Reports",
        "https://moderndiplomacy.eu/2026/02/24/no-win-situation-for-trump-why-the-us-cannot-achieve-military-victory/",
        "32.4279",
        "53.6880",
    ),
    _curated(
        Sector.CONFLICT,
        "Ukraine War: 4th Anniversary, Putin's Aims Unchanged, Peace Dim",
        "Russia, Ukraine, NATO, USA",
        "Four years since Russia's full-scale invasion; Ukrainian forces counterattack in Dnipropetrovsk; "
        "Western experts see no change in Putin's objectives and dimming peace prospects",
        "Russia Matters / Reddit CredibleDefense",
        "https://www.russiamatters.org/analysis/four-years-russias-invasion-western-experts-see-putins-aims-largely-unchanged-prospects",
        "48.3794",
        "31.1656",
    ),
    _curated(
        Sector.HEALTH,
        "South Sudan: Conflict Deepens Hunger Crisis, Aid Access Blocked",
        "UN OCHA, WFP, South Sudan government, armed factions",
        "1.2 million+ people at crisis-level food insecurity; armed conflict blocking humanitarian corridors. "
        "UN warns of imminent famine if aid cannot reach affected populations",
        "UN News",
        "https://news.un.org/en/story/2026/02/1167005",
        "6.8770",
        "31.3070",
    ),
    _curated(
        Sector.ECONOMY,
        "Trump 15% Global Tariff: Supreme Court Clips IEEPA, Trade War Escalates",
        "USA, EU, UK, WTO, US Supreme Court",
        "SCOTUS struck down IEEPA tariffs 6-3; Trump immediately responded with a 15% blanket tariff under "
        "Section 122, effective Feb 24. Wall Street drops; EU and UK scramble to respond",
        "NYT / Reuters / CFR",
        "https://www.cfr.org/articles/the-supreme-court-clipped-trumps-tariff-powers-and-opened-new-trade-battle-fronts",
        "38.8951",
        "-77.0364",
    ),
    _curated(
        Sector.TECHNOLOGY,
        'US "Totally Rejects" Global AI Governance at India Summit',
        "USA White House, India AI Summit, EU, UN",
        "White House tech adviser Kratsios declares US opposition to risk-focused multilateral AI regulation "
        "at the Global AI Summit in New Delhi, fracturing international consensus on AI governance",
        "France 24",
        "https://www.france24.com/en/technology/20260220-us-totally-rejects-global-ai-governance-white-house-adviser-tells-india-summit",
        "28.6139",
        "77.2090",
    ),
    _curated(
        Sector.TECHNOLOGY,
        "UN Launches AI Human Rights Governance Framework",
        "UN Human Rights Council, Volker Türk, OpenAI, member states",
        "UN High Commissioner Türk calls for inclusivity, accountability and global AI standards at the 61st "
        "HRC session in Geneva, directly countering the US unilateralist stance",
        "UN News / Dig.Watch",
        "https://news.un.org/en/story/2026/02/1167000",
        "46.2044",
        "6.1432",
    ),
    _curated(
        Sector.ENVIRONMENT,
        "SCOTUS Takes Up Exxon/Suncor Climate Accountability Case",
        "US Supreme Court, ExxonMobil, Suncor Energy, Boulder CO, fossil fuel sector",
        "Supreme Court agrees to hear oil companies' bid to dismiss Boulder's climate damage lawsuit; the "
        "ruling could shield the fossil fuel industry from a wave of climate litigation",
        "The Guardian / LA Times",
        "https://www.theguardian.com/us-news/2026/feb/23/supreme-court-suncor-exxonmobil-case",
        "37.0902",
        "-95.7129",
    ),
    _curated(
        Sector.HEALTH,
        "WFP: Somalia Food Aid Could Halt Within Weeks Due to Funding Collapse",
        "WFP, Somalia government, USAID (dismantled), donor nations",
        "World Food Programme warns food aid to Somalia may fully stop within weeks, linked to the USAID "
        "dismantling and declining donor contributions. 1.2M+ face acute food insecurity",
        "CNBC Africa / WFP",
        "https://www.cnbcafrica.com/2026/food-aid-in-somalia-could-halt-within-weeks-due-to-funding-shortages-wfp-warns/",
        "2.0469",
        "45.3418",
    ),
    _curated(
        Sector.HEALTH,
        "USAID Dismantled: Lancet Study Projects Mass Death Toll After 1 Year",
        "USA (Trump admin), USAID, Lancet, WHO, Global South nations",
        "One year since USAID was dismantled, a Lancet study projects severe mortality across HIV, TB, malaria "
        "and maternal health programs in Sub-Saharan Africa and South/Southeast Asia",
        "CNN / The Lancet",
        "https://www.cnn.com/2026/02/04/world/lancet-usaid-global-aid-cuts-intl",
        "0.0",
        "20.0",
    ),
    _curated(
        Sector.CONFLICT,
        'Mexico: CJNG Boss "El Mencho" Killed, Cartel Retaliatory Violence Erupts Across Jalisco',
        "Mexico (Sheinbaum govt), CJNG Cartel, US Intelligence",
        "US-assisted military raid killed CJNG leader Nemesio Oseguera on Feb 22; retaliation followed with "
        "burning buses, highway blockades and gunfights across Jalisco and Michoacán; 10,000 troops deployed",
        "NYT / Modern Diplomacy",
        "https://www.nytimes.com/2026/02/22/world/americas/jalisco-new-generation-cartel-leader-killed.html",
        "20.6597",
        "-103.3496",
    ),
    _curated(
        Sector.CONFLICT,
        "US-Mexico Sovereignty Standoff: Sheinbaum Rejects Intervention, Counters Tariffs, Faces Musk",
        "USA (Trump/Musk), Mexico (Sheinbaum), USMCA",
        "Mexico rejects US military intervention despite threats; Sheinbaum imposes 50% retaliatory tariffs "
        "on 1,000+ US goods and considers legal action after Elon Musk's criticism",
        "Al Jazeera / CRS Report",
        "https://www.aljazeera.com/news/2026/2/24/mexicos-claudia-sheinbaum-considers-legal-action-after-elon-musk-criticism",
        "19.4326",
        "-99.1332",
    ),
    _curated(
        Sector.HEALTH,
        'Philippines: Duterte Faces ICC Pre-Trial, "War on Drugs" Killings Prosecuted Internationally',
        "ICC, Rodrigo Duterte, Philippines, Human Rights Watch",
        "ICC pre-trial hearings opened Feb 23: prosecutors allege Duterte personally directed extrajudicial "
        "drug war killings (est. 6,000-30,000 deaths 2016-2022), a landmark accountability case in SE Asia",
        "The Star / Foreign Policy / ISEAS",
        "https://foreignpolicy.com/2026/02/24/duterte-icc-court-hearing-war-drugs/",
        "14.5995",
        "120.9842",
    ),
    _curated(
        Sector.CONFLICT,
        "ASEAN at 50: Treaty of Amity Under Strain as US Unilateralism and China Pressure Mount",
        "ASEAN, USA, China, RSIS Singapore",
        "ASEAN's Treaty of Amity & Cooperation marks 50 years amid US tariff unilateralism, Chinese South "
        "China Sea claims and major-power rivalries testing the bloc's non-alignment doctrine",
        "CNA / RSIS",
        "https://www.channelnewsasia.com/asia/asean-treaty-amity-cooperation-southeast-asia-mark-50-years-5949361",
        "13.7563",
        "100.5018",
    ),
    _curated(
        Sector.CONFLICT,
        "Rohingya Crisis Metastasizes: Refugee Camps Breeding Transnational Militant Networks Across SE Asia",
        "Rohingya refugees, Bangladesh, Malaysia, Thailand, Indonesia, ARSA militants",
        "The Rohingya refugee crisis (1M+ displaced) is feeding arms trafficking, people smuggling and "
        "radicalization networks spreading into Malaysia, Thailand and Indonesia",
        "The Diplomat",
        "https://thediplomat.com/2026/02/southeast-asia-and-the-rohingya-militant-threat/",
        "21.9162",
        "95.9560",
    ),
    _curated(
        Sector.CONFLICT,
        "Myanmar Civil War: Junta Losing Ground, Civilian Displacement Floods Thailand & Malaysia Borders",
        "Myanmar Military (SAC), PDFs, NUG, Thailand, Malaysia",
        "The junta is losing territory in Shan, Kayah and Rakhine states to People's Defence Forces; "
        "displacement is spilling into Thailand and India and Malaysia arrested 7,043 undocumented migrants",
        "NST Malaysia / ISEAS",
        "https://www.nst.com.my/newssummary/1382735",
        "19.7633",
        "96.0785",
    ),
)


def get_curated_records() -> List[EventRecord]:
    """Copies of the curated set, in display order."""
    return [copy.deepcopy(record) for record in CURATED_RECORDS]
