"""GraphQL queries for GitHub API."""

# Issues opened by a user within a time window
ISSUE_CONTRIBUTIONS_QUERY = """
query IssueContributions($user: String!, $from: DateTime!, $to: DateTime!, $cursor: String) {
    user(login: $user) {
        contributionsCollection(from: $from, to: $to) {
            issueContributions(first: 100, after: $cursor) {
                pageInfo {
                    endCursor
                    hasNextPage
                }
                nodes {
                    issue {
                        repository {
                            name
                            owner {
                                login
                            }
                        }
                        title
                        state
                        createdAt
                        bodyText
                    }
                }
            }
        }
    }
}
"""

# Pull requests opened by a user within a time window
PULL_REQUEST_CONTRIBUTIONS_QUERY = """
query PullRequestContributions($user: String!, $from: DateTime!, $to: DateTime!, $cursor: String) {
    user(login: $user) {
        contributionsCollection(from: $from, to: $to) {
            pullRequestContributions(first: 100, after: $cursor) {
                pageInfo {
                    endCursor
                    hasNextPage
                }
                nodes {
                    pullRequest {
                        repository {
                            name
                            owner {
                                login
                            }
                        }
                        title
                        state
                        createdAt
                        bodyText
                    }
                }
            }
        }
    }
}
"""

# Repositories created or forked by a user within a time window
REPOSITORY_CONTRIBUTIONS_QUERY = """
query RepositoriesCreated($user: String!, $from: DateTime!, $to: DateTime!, $cursor: String) {
    user(login: $user) {
        contributionsCollection(from: $from, to: $to) {
            repositoryContributions(first: 100, after: $cursor) {
                pageInfo {
                    endCursor
                    hasNextPage
                }
                nodes {
                    repository {
                        name
                        description
                        url
                        createdAt
                        owner {
                            login
                        }
                        parent {
                            owner {
                                login
                            }
                        }
                    }
                }
            }
        }
    }
}
"""
