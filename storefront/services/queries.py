# storefront/services/queries.py
# GraphQL documents sent to the Storefront API.

PRODUCT_CARD_FRAGMENT = """
fragment ProductCard on Product {
  id
  title
  handle
  priceRange {
    minVariantPrice {
      amount
      currencyCode
    }
  }
  images(first: 1) {
    nodes {
      id
      url
      altText
      width
      height
    }
  }
  variants(first: 1) {
    nodes {
      id
      availableForSale
    }
  }
  okendoStarRatingSnippet: metafield(
    namespace: "$app:reviews"
    key: "star_rating_snippet"
  ) {
    value
  }
}
"""

RECOMMENDED_PRODUCTS_QUERY = PRODUCT_CARD_FRAGMENT + """
query RecommendedProducts($country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  products(first: 100, sortKey: UPDATED_AT, reverse: true) {
    nodes {
      ...ProductCard
    }
  }
}
"""

BUNDLES_COLLECTION_QUERY = PRODUCT_CARD_FRAGMENT + """
query BundlesCollection($handle: String!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  collection(handle: $handle) {
    id
    title
    products(first: 4) {
      nodes {
        ...ProductCard
      }
    }
  }
}
"""

BLOGS_QUERY = """
query GetBlogs($first: Int!, $articlesFirst: Int!) {
  blogs(first: $first) {
    edges {
      node {
        id
        title
        handle
        articles(first: $articlesFirst) {
          edges {
            node {
              id
              title
              contentHtml
              excerpt
              publishedAt
              authorV2 {
                name
              }
              image {
                url
                altText
              }
            }
          }
        }
      }
    }
  }
}
"""

CART_FRAGMENT = """
fragment CartApi on Cart {
  id
  checkoutUrl
  totalQuantity
  cost {
    subtotalAmount {
      amount
      currencyCode
    }
    totalAmount {
      amount
      currencyCode
    }
  }
  lines(first: 100) {
    nodes {
      id
      quantity
      cost {
        totalAmount {
          amount
          currencyCode
        }
        compareAtAmountPerQuantity {
          amount
          currencyCode
        }
      }
      merchandise {
        ... on ProductVariant {
          id
          title
          image {
            id
            url
            altText
            width
            height
          }
          product {
            id
            title
            handle
          }
          selectedOptions {
            name
            value
          }
        }
      }
    }
  }
}
"""

CART_QUERY = CART_FRAGMENT + """
query CartQuery($cartId: ID!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  cart(id: $cartId) {
    ...CartApi
  }
}
"""

_USER_ERRORS = """
    userErrors {
      code
      field
      message
    }
"""

CART_CREATE_MUTATION = CART_FRAGMENT + """
mutation CartCreate($lines: [CartLineInput!]!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  cartCreate(input: {lines: $lines}) {
    cart {
      ...CartApi
    }""" + _USER_ERRORS + """
  }
}
"""

CART_LINES_ADD_MUTATION = CART_FRAGMENT + """
mutation CartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  cartLinesAdd(cartId: $cartId, lines: $lines) {
    cart {
      ...CartApi
    }""" + _USER_ERRORS + """
  }
}
"""

CART_LINES_UPDATE_MUTATION = CART_FRAGMENT + """
mutation CartLinesUpdate($cartId: ID!, $lines: [CartLineUpdateInput!]!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  cartLinesUpdate(cartId: $cartId, lines: $lines) {
    cart {
      ...CartApi
    }""" + _USER_ERRORS + """
  }
}
"""

CART_LINES_REMOVE_MUTATION = CART_FRAGMENT + """
mutation CartLinesRemove($cartId: ID!, $lineIds: [ID!]!, $country: CountryCode, $language: LanguageCode)
@inContext(country: $country, language: $language) {
  cartLinesRemove(cartId: $cartId, lineIds: $lineIds) {
    cart {
      ...CartApi
    }""" + _USER_ERRORS + """
  }
}
"""
