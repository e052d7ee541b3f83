"""GraphQL query templates for AniList user data.

Every template is a QuerySpec built once at import time. Fragments are
selection sets only; the assembler supplies the operation header, the root
field and the user selector.
"""

from anigraph.models import IdentifierKind, QuerySpec

ANY_IDENTIFIER = frozenset({IdentifierKind.NAME, IdentifierKind.ID})

PROFILE_FRAGMENT = """
id
name
about
avatar { large medium }
bannerImage
isFollowing
isFollower
isBlocked
options { titleLanguage displayAdultContent airingNotifications profileColor }
mediaListOptions { scoreFormat rowOrder }
favourites {
  anime { nodes { id title { romaji english native userPreferred } } }
  manga { nodes { id title { romaji english native userPreferred } } }
  characters { nodes { id name { full native } } }
  staff { nodes { id name { full native } } }
  studios { nodes { id name } }
}
siteUrl
donatorTier
donatorBadge
moderatorRoles
createdAt
updatedAt
"""

STATS_FRAGMENT = """
statistics {
  anime {
    count
    meanScore
    standardDeviation
    minutesWatched
    episodesWatched
    formats { count format }
    statuses { count status }
    genres { count genre meanScore minutesWatched }
  }
  manga {
    count
    meanScore
    standardDeviation
    chaptersRead
    volumesRead
    formats { count format }
    statuses { count status }
    genres { count genre meanScore chaptersRead }
  }
}
"""

ACTIVITY_FRAGMENT = """
pageInfo { total currentPage lastPage hasNextPage perPage }
activities(userId: $id, sort: ID_DESC) {
  ... on ListActivity {
    id status type progress
    media { id title { romaji english native userPreferred } type }
    createdAt likeCount replies { id text likeCount }
  }
  ... on TextActivity {
    id userId type text createdAt likeCount replies { id text likeCount }
  }
  ... on MessageActivity {
    id recipientId type message createdAt likeCount replies { id text likeCount }
  }
}
"""

UPDATE_FRAGMENT = """
id
name
about
options {
  titleLanguage
  displayAdultContent
  airingNotifications
  profileColor
  timezone
  activityMergeTime
  staffNameLanguage
  restrictMessagesToFollowing
}
mediaListOptions { scoreFormat rowOrder }
"""

# UserOptionsInput fields accepted by the updateUser mutation.
UPDATE_VARIABLES = {
    "about": "String",
    "titleLanguage": "UserTitleLanguage",
    "displayAdultContent": "Boolean",
    "airingNotifications": "Boolean",
    "scoreFormat": "ScoreFormat",
    "rowOrder": "String",
    "profileColor": "String",
    "donatorBadge": "String",
    "notificationOptions": "[NotificationOptionInput]",
    "timezone": "String",
    "activityMergeTime": "Int",
    "animeListOptions": "MediaListOptionsInput",
    "mangaListOptions": "MediaListOptionsInput",
    "staffNameLanguage": "UserStaffNameLanguage",
    "restrictMessagesToFollowing": "Boolean",
    "disabledListActivity": "[ListActivityOptionInput]",
}

ACTIVITY_PAGE_SIZE = 25

USER_PROFILE = QuerySpec(
    name="user_profile",
    root="User",
    fragment=PROFILE_FRAGMENT,
    accepts=ANY_IDENTIFIER,
)

USER_STATS = QuerySpec(
    name="user_stats",
    root="User",
    fragment=STATS_FRAGMENT,
    accepts=ANY_IDENTIFIER,
)

VIEWER_PROFILE = USER_PROFILE.scoped("Viewer", "viewer_profile")

RECENT_ACTIVITY = QuerySpec(
    name="recent_activity",
    root="Page",
    fragment=ACTIVITY_FRAGMENT,
    accepts=frozenset({IdentifierKind.ID}),
    selector_at_root=False,
    variables={"page": "Int", "perPage": "Int"},
    root_arguments=("page", "perPage"),
    defaults={"page": 1, "perPage": ACTIVITY_PAGE_SIZE},
    required_variables=frozenset({"page", "perPage"}),
)

USER_UPDATE = QuerySpec(
    name="user_update",
    root="updateUser",
    fragment=UPDATE_FRAGMENT,
    operation="mutation",
    variables=UPDATE_VARIABLES,
    root_arguments=tuple(UPDATE_VARIABLES),
)

REGISTRY: dict[str, QuerySpec] = {
    spec.name: spec
    for spec in (USER_PROFILE, USER_STATS, VIEWER_PROFILE, RECENT_ACTIVITY, USER_UPDATE)
}
